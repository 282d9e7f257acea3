"""业务模块（按领域组织：Router → Service → Repository）"""
