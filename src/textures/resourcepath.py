ASSETS_PATH: str = "./assets/"
TEXTURES_PATH: str = ASSETS_PATH + "textures/"

# Single atlas: tile chips, the actor walk cycle (row 0) and the shadow (row 3)
SPRITES_TEXTURE_PATH: str = TEXTURES_PATH + "sprites.png"
