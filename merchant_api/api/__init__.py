"""
FastAPI routers. Each router is a thin adapter over one service.
"""
