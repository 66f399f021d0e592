"""
Property Tests - 性质测试

该目录包含基于hypothesis的性质测试，验证牌堆操作的代数性质：
翻转的对合性、抽牌/插入的往返恢复、洗牌的置换性质.
"""
