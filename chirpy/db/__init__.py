from chirpy.db.store import JSONStore

__all__ = ["JSONStore"]
