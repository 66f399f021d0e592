"""
Unit Tests - 单元测试

覆盖牌、牌堆、顺序算法、配置服务、会话与CLI.
"""
