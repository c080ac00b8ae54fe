"""
stock_keeper

識別子をキーとする制約付きインメモリストアと、その JSON 永続化を提供します。
"""
