"""核心组件：数据库、安全、异常、日志、中间件"""
