from .somos import SEED_VALUE, new_buffer, somos4_step, somos_step

__all__ = [
    "SEED_VALUE",
    "new_buffer",
    "somos_step",
    "somos4_step",
]
