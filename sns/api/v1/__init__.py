"""API v1"""
