"""Splash View - a rotating ring of circles that collapses and opens into a hole."""

__version__ = "0.1.0"

from .config import SplashConfig, create_default_config
from .listener import SplashHost, SplashListener
from .phases import PhaseKind
from .renderer import FrameRenderer, Surface
from .splash import SplashView
from .state_machine import SplashStateMachine

__all__ = [
    'SplashConfig',
    'create_default_config',
    'SplashHost',
    'SplashListener',
    'PhaseKind',
    'FrameRenderer',
    'Surface',
    'SplashView',
    'SplashStateMachine',
]
