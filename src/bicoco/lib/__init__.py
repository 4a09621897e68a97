"""
Builtin library of bicoco
"""
