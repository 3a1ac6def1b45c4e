from .line_ops import is_blank, remove_blank_lines

__all__ = ['is_blank', 'remove_blank_lines']
