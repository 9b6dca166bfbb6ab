import pygame
from wilson_maze.core.grid import Grid, CellType

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (0, 0, 0)
    COLOR_PATH = (255, 255, 255)
    COLOR_WALK = (255, 140, 0)   # Orange, walk not yet erased
    COLOR_HEAD = (220, 40, 40)

    def __init__(self, grid: Grid, generator=None, width=1280, height=720, steps_per_frame=1):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = steps_per_frame

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        self.offset_x = (self.screen_width - self.grid.width * self.cell_size) / 2
        self.offset_y = (self.screen_height - self.grid.height * self.cell_size) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Wilson Maze - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_f:
                    self.fit_to_screen()

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(0.05, min(100.0, self.cell_size))

                # Keep the cell under the mouse in place
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_cell(self, x, y, color):
        sx, sy = self.world_to_screen(x, y)
        size = int(self.cell_size) + 1
        pygame.draw.rect(self.surface, color, (int(sx), int(sy), size, size))

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        # Culling: visible cell range, clamped to the grid
        start_x = max(0, int(-self.offset_x / self.cell_size))
        start_y = max(0, int(-self.offset_y / self.cell_size))
        end_x = min(self.grid.width, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_y = min(self.grid.height, int((self.screen_height - self.offset_y) / self.cell_size) + 1)

        for y in range(start_y, end_y):
            row = y * self.grid.width
            for x in range(start_x, end_x):
                if self.grid.cells[row + x] == CellType.PATH:
                    self.draw_cell(x, y, self.COLOR_PATH)
                else:
                    self.draw_cell(x, y, self.COLOR_WALL)

        # Raw walk being replayed, drawn over the maze
        walk = getattr(self.generator, "walk", None)
        if walk:
            for x, y in walk:
                if start_x <= x < end_x and start_y <= y < end_y:
                    self.draw_cell(x, y, self.COLOR_WALK)
        head = getattr(self.generator, "head", None)
        if head:
            self.draw_cell(head[0], head[1], self.COLOR_HEAD)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        walks = getattr(self.generator, "walk_count", 0)
        status = "Done" if self.gen_finished else "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({self.grid.node_count():,} nodes)",
            f"Walks: {walks:,}",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()

            if gen_iter and not self.gen_finished:
                try:
                    for _ in range(self.steps_per_frame):
                        next(gen_iter)
                except StopIteration:
                    self.gen_finished = True

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
