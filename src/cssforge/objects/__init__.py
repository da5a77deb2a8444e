from .codec import decode, encode
from .rectangle import Rectangle, make_rectangle

__all__ = ["Rectangle", "make_rectangle", "encode", "decode"]
