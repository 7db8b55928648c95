import pygame
import settings
import physics

def draw_hexagon(surface, hexagon):
    points = [(float(x), float(y)) for x, y in physics.get_hexagon_vertices(hexagon)]
    pygame.draw.polygon(surface, settings.HEXAGON_COLOR, points, 3)
    for p in points:
        pygame.draw.circle(surface, settings.VERTEX_COLOR, (int(p[0]), int(p[1])), 4)

def draw_ball(surface, ball):
    pos = (int(ball.pos[0]), int(ball.pos[1]))
    pygame.draw.circle(surface, settings.BALL_COLOR, pos, int(ball.radius))
    # Small highlight, top-left
    hl = (int(ball.pos[0] - ball.radius / 3), int(ball.pos[1] - ball.radius / 3))
    pygame.draw.circle(surface, (255, 255, 255), hl, max(1, int(ball.radius / 3)))

def info_lines(params, rotation_speed, ball, paused):
    lines = [
        f"Gravity: {params.gravity:.0f}  [G/B]",
        f"Air friction: {params.air_friction:.3f}  [F/V]",
        f"Bounce damping: {params.bounce_damping:.2f}  [D/C]",
        f"Rotation: {rotation_speed:.1f} rad/s  [UP/DOWN]",
        f"Speed: {ball.speed:.0f}",
    ]
    if paused:
        lines.append("PAUSED  [SPACE]")
    return lines

def draw_info_panel(surface, font, params, rotation_speed, ball, paused):
    y_off = 10
    for line in info_lines(params, rotation_speed, ball, paused):
        color = settings.PAUSED_COLOR if line.startswith("PAUSED") else settings.TEXT_COLOR
        txt = font.render(line, True, color)
        surface.blit(txt, (10, y_off))
        y_off += 20
