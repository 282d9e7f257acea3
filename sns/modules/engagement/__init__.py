"""互动模块"""
