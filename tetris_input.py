"""Keyboard to command mapping"""
from typing import Dict, Iterable, Set

import pygame

from tetris_game import Command

KEYMAP: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_e: Command.ROTATE_CW,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_q: Command.ROTATE_CCW,
    pygame.K_z: Command.ROTATE_CCW,
}


def commands_from_events(events: Iterable[pygame.event.Event]) -> Set[Command]:
    # KEYDOWN only: holding a key does not repeat the command
    cmds = set()
    for e in events:
        if e.type == pygame.KEYDOWN and e.key in KEYMAP:
            cmds.add(KEYMAP[e.key])
    return cmds
