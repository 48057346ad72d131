"""Key bindings"""
from typing import Optional
import pygame
from tetris_state import InputEvent

KEYMAP = {
    pygame.K_UP: InputEvent.ROTATE,
    pygame.K_LEFT: InputEvent.LEFT,
    pygame.K_RIGHT: InputEvent.RIGHT,
    pygame.K_DOWN: InputEvent.DROP,
}

def event_for_key(key: int) -> Optional[InputEvent]:
    return KEYMAP.get(key)
