# ui.py
import pygame
from config import WIDTH, HEIGHT, COLOR_TEXT

class Button:
    def __init__(self, rect, text, font_size):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = pygame.font.SysFont("Arial", font_size)

    def draw(self, surf):
        pygame.draw.rect(surf, (100,100,100), self.rect)
        txt = self.font.render(self.text, True, (255,255,255))
        surf.blit(txt, (self.rect.centerx - txt.get_width()/2,
                        self.rect.centery - txt.get_height()/2))


class Hud:
    """Score/lives/status sink; also draws the prompts around a session.

    Fonts are loaded once here, so pygame must be initialised first.
    """

    def __init__(self, width=WIDTH, height=HEIGHT):
        self.width = width
        self.height = height
        self.score = 0
        self.lives = 0
        self.final_score = None
        self.restart_button = Button((width/2-70, height/2+60, 140, 40), "Restart", 24)

        self.small_font = pygame.font.SysFont("Arial", 16)
        self.font = pygame.font.SysFont("Arial", 20)
        self.big_font = pygame.font.SysFont("Arial", 24)
        self.title_font = pygame.font.SysFont("Arial", 40)

    # status sink interface
    def set_score(self, score):
        self.score = score

    def set_lives(self, lives):
        self.lives = lives
        if lives > 0:
            self.final_score = None

    def on_game_over(self, final_score):
        self.final_score = final_score

    # drawing
    def _centered(self, surf, text, font, cy):
        img = font.render(text, True, COLOR_TEXT)
        surf.blit(img, (self.width//2 - img.get_width()//2, cy - img.get_height()//2))

    def draw(self, surf):
        surf.blit(self.font.render(f"Score: {self.score}", True, COLOR_TEXT), (10, 8))
        lives = self.font.render(f"Lives: {self.lives}", True, COLOR_TEXT)
        surf.blit(lives, (self.width - lives.get_width() - 10, 8))

    def draw_start_prompt(self, surf):
        self._centered(surf, "Tap to Start", self.big_font, self.height//2)
        self._centered(surf, "(or press SPACE)", self.small_font, self.height//2 + 30)

    def draw_game_over(self, surf, high_score):
        """Overlay with the final score and the session best."""
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 170))
        surf.blit(overlay, (0, 0))
        self._centered(surf, "Game Over", self.title_font, self.height//2 - 80)
        self._centered(surf, f"Score: {self.final_score or 0}", self.big_font, self.height//2 - 18)
        self._centered(surf, f"Best: {high_score}", self.big_font, self.height//2 + 17)
        self.restart_button.draw(surf)
