"""Small building blocks: text lines, counters, bit flags, key input state, worker threads, rectangle sets and JSON values."""

__version__ = "0.1.0"

__all__ = [
    "bit_bool",
    "counter",
    "json_base",
    "json_containers",
    "json_scalars",
    "key_input",
    "math_square",
    "multithread",
    "text_object",
]