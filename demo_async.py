"""Demo script driving the splash view from an asyncio frame loop."""

import asyncio
import pygame
from splashview import SplashView, create_default_config
from splashview.logger import Logger
from splashview.loop import SplashLoop
from animator import PygameHost, PygameSurface


async def main():
    """Run the splash on an asyncio loop, drawing through pygame."""
    print("=" * 60)
    print("Splash View - asyncio Frame Loop Demo")
    print("=" * 60)

    window_size = (400, 400)
    pygame.init()
    screen = pygame.display.set_mode(window_size)
    pygame.display.set_caption("Splash View - asyncio")

    def draw_content():
        screen.fill((32, 36, 48))
        pygame.draw.circle(screen, (240, 240, 240), (200, 200), 60, 4)

    host = PygameHost()
    view = SplashView(create_default_config(density=1.5), surface=PygameSurface(screen),
                      logger=Logger())
    host.add_view(view)
    view.on_resize(*window_size)

    def frame_callback(_view) -> bool:
        pygame.display.flip()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
        return True

    loop = SplashLoop(view, frame_callback=frame_callback, fps=60, underlay=draw_content)

    view.start()
    loop.start()
    try:
        await asyncio.sleep(2.0)
        view.request_disappear()
        await loop.wait_for_stop()
    finally:
        loop.stop()
        view.logger.log_final(view)
        pygame.quit()


if __name__ == "__main__":
    asyncio.run(main())
