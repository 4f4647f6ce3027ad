"""
Pixel Palace - arcade games with a deterministic simulation core.

Modules:
- core: Abstract interfaces for games and renderers, side-effect ports
- games: Game implementations (Space Invaders)
- audio: Synthesized sound effects
- storage: High score and preference persistence
- utils: Configuration and logging
"""

__version__ = "1.0.0"
