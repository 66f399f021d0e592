"""
Integration Tests - 集成测试

通过CLI端到端驱动牌桌会话.
"""
