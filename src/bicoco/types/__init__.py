from .na import NA, na

__all__ = ['NA', 'na']
