"""
ormdb-init - one-shot MongoDB bootstrap for the ormdb database.
"""
__version__ = "0.1.0"
