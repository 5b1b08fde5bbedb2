BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREY = (128, 128, 128)
DARK_GREY = (40, 40, 40)
GRID = (55, 60, 70)
AXIS = (110, 120, 140)
YELLOW = (240, 200, 60)
BACKGROUND = (24, 26, 30)
