"""统一响应模型

成功：{"code": 0, "message": "success", "data": ...}
分页：在成功结构上追加 total / page / page_size
失败：{"code": <ErrorCode>, "message": ..., "data": null, "detail": {...}}
"""

from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class BaseSchema(BaseModel):
    """
    所有 Schema 的基类

    - from_attributes: 直接从 ORM 实体构建响应
    - str_strip_whitespace: 去除首尾空白（密码字段单独关闭，见 modules/user/schemas.py）

    datetime 字段使用 UTCDateTime（见 datetime_types.py）
    """

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_default=True,
    )


class PageParams(BaseModel):
    """分页参数（page 从 0 开始）"""

    page: int = 0
    page_size: int = 20


class ApiResponse(BaseModel, Generic[T]):
    """单个对象响应"""

    code: int = 0
    message: str = "success"
    data: T


class ApiPagedResponse(BaseModel, Generic[T]):
    """分页列表响应"""

    code: int = 0
    message: str = "success"
    data: list[T]
    total: int
    page: int
    page_size: int

    @classmethod
    def of(cls, result: tuple[list[T], int], params: PageParams) -> Self:
        """由 Service 返回的 (items, total) 构建"""
        items, total = result
        return cls(data=items, total=total, page=params.page, page_size=params.page_size)


class ErrorResponse(BaseModel):
    """错误响应"""

    code: int
    message: str
    data: None = None
    detail: dict[str, Any] | None = None
