import pygame
import settings
import simulation
import debug_console
from entities import Ball, Hexagon, PhysicsParams
from ui import draw_hexagon, draw_ball, draw_info_panel


def clamp(value, low, high):
    return max(low, min(high, value))

def adjust(value, value_range, direction):
    low, high, inc = value_range
    return round(clamp(value + direction * inc, low, high), 4)

def handle_param_key(key, params, rotation_speed):
    """Apply a parameter hotkey. Returns the (possibly changed) rotation speed."""
    if key == pygame.K_UP:
        rotation_speed = adjust(rotation_speed, settings.ROTATION_SPEED_RANGE, 1)
    elif key == pygame.K_DOWN:
        rotation_speed = adjust(rotation_speed, settings.ROTATION_SPEED_RANGE, -1)
    elif key == pygame.K_g:
        params.gravity = adjust(params.gravity, settings.GRAVITY_RANGE, 1)
    elif key == pygame.K_b:
        params.gravity = adjust(params.gravity, settings.GRAVITY_RANGE, -1)
    elif key == pygame.K_f:
        params.air_friction = adjust(params.air_friction, settings.AIR_FRICTION_RANGE, 1)
    elif key == pygame.K_v:
        params.air_friction = adjust(params.air_friction, settings.AIR_FRICTION_RANGE, -1)
    elif key == pygame.K_d:
        params.bounce_damping = adjust(params.bounce_damping, settings.BOUNCE_DAMPING_RANGE, 1)
    elif key == pygame.K_c:
        params.bounce_damping = adjust(params.bounce_damping, settings.BOUNCE_DAMPING_RANGE, -1)
    else:
        return rotation_speed

    debug_console.console_log("Parameters changed", {**params.as_dict(), "rotation_speed": rotation_speed}, to_file=False)
    return rotation_speed

def main():
    pygame.init()
    window = pygame.display.set_mode((settings.SCREEN_WIDTH, settings.SCREEN_HEIGHT))
    pygame.display.set_caption("Hexagon Bounce")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Arial", 16)

    ball = Ball()
    hexagon = Hexagon()
    params = PhysicsParams()
    rotation_speed = settings.ROTATION_SPEED
    paused = False

    debug_console.console_log("Simulation started", params.as_dict(), to_file=False)

    running = True
    while running:
        # Clamp so a stalled frame cannot blow up the integration
        dt = min(clock.tick(settings.FPS) / 1000.0, settings.MAX_DT)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_r:
                    simulation.reset_ball(ball)
                    debug_console.console_log("Ball reset", {"vel": ball.vel}, to_file=False)
                else:
                    rotation_speed = handle_param_key(event.key, params, rotation_speed)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if simulation.reposition_ball(ball, hexagon, mx, my):
                    debug_console.console_log("Ball moved", {"pos": ball.pos, "vel": ball.vel}, to_file=False)
                else:
                    debug_console.console_log("Click outside hexagon ignored", {"pos": [mx, my]}, to_file=False)

        if not paused:
            simulation.step(ball, hexagon, params, rotation_speed, dt)

        window.fill(settings.BG_COLOR)
        draw_hexagon(window, hexagon)
        draw_ball(window, ball)
        draw_info_panel(window, font, params, rotation_speed, ball, paused)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
