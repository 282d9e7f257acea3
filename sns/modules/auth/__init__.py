"""认证模块"""
