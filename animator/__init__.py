"""Animator package hosting the splash view in a pygame window."""

from .pygame_animator import PygameAnimator, PygameHost, PygameSurface

__all__ = ['PygameAnimator', 'PygameHost', 'PygameSurface']
