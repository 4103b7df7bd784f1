"""Sprite-sheet indices for every tile variant the generator emits."""

# Draw layers
GROUND_LAYER = 0
FEATURE_LAYER = 1

# Ground variants, chosen by the autotile pass
GROUND_FILL = 0
GROUND_CORNER_A = 1  # top and left open
GROUND_CORNER_B = 2  # top and right open
GROUND_CORNER_C = 3  # bottom and left open
GROUND_CORNER_D = 4  # bottom and right open

# Feature variants. MOUNTAIN shares its cell on the sheet with GROUND_CORNER_A;
# the two are told apart by layer and tint.
MOUNTAIN = 1
SMALL_TREE = 6
LARGE_TREES = (7, 8, 9)
HOUSE_LARGE = 12
HOUSE_SMALL = 13
BONES = (18, 19)

GROUND_VARIANTS = frozenset({
    GROUND_FILL,
    GROUND_CORNER_A,
    GROUND_CORNER_B,
    GROUND_CORNER_C,
    GROUND_CORNER_D,
})

TREE_VARIANTS = frozenset({SMALL_TREE, *LARGE_TREES})
HOUSE_VARIANTS = frozenset({HOUSE_LARGE, HOUSE_SMALL})
BONE_VARIANTS = frozenset(BONES)
