"""Buffer Switcher: rank buffers against a typed query and jump to one."""

__version__ = "0.1.0"
