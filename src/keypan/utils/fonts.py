from functools import lru_cache

import pygame.freetype
from pygame.freetype import Font


@lru_cache(maxsize=None)
def get_font(size: int = 18) -> Font:
    if not pygame.freetype.get_init():
        pygame.freetype.init()

    return pygame.freetype.SysFont("freesansbold", size)
