"""帖子模块"""
