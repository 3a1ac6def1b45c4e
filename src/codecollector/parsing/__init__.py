from .parser import _build_parser, parse_config, usage_text

__all__ = ['_build_parser', 'parse_config', 'usage_text']
