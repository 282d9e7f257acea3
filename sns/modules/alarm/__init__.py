"""通知模块"""
