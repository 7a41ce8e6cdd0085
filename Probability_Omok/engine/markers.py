"""Probability markers, definite pieces, and the per-player tier rotation."""

BOARD_SIZE = 15

# Markers store the percentage chance of resolving to Black; 0 is an empty cell.
EMPTY = 0
BLACK90 = 90
BLACK70 = 70
BLACK30 = 30
BLACK10 = 10

MARKERS = (BLACK90, BLACK70, BLACK30, BLACK10)

# Definite pieces and players: -1 (black), 0 (empty), 1 (white)
BLACK = -1
WHITE = 1

# Rotation index -> marker. White reuses the Black-probability tiers inverted.
PLAYER_TIERS = {
    BLACK: (BLACK90, BLACK70),
    WHITE: (BLACK10, BLACK30),
}

MARKER_LABELS = {
    BLACK90: "90%",
    BLACK70: "70%",
    BLACK30: "30%",
    BLACK10: "10%",
}

# Grey level per marker, darker means more likely Black.
MARKER_SHADES = {
    BLACK90: (26, 26, 26),
    BLACK70: (77, 77, 77),
    BLACK30: (153, 153, 153),
    BLACK10: (204, 204, 204),
}

NEXT_PIECE_TEXT = {
    BLACK90: "Next Piece: 90% Black",
    BLACK70: "Next Piece: 70% Black",
    BLACK10: "Next Piece: 90% White (10% Black)",
    BLACK30: "Next Piece: 70% White (30% Black)",
}


def is_marker(value):
    return value in MARKERS


def player_name(color):
    return "Black" if color == BLACK else "White"


def opponent(color):
    return -color


def marker_for(color, prob_index):
    """Return the marker a player places with the given rotation index."""
    if color not in PLAYER_TIERS:
        raise ValueError("color must be -1 (black) or 1 (white)")
    return PLAYER_TIERS[color][prob_index % 2]


def resolve_marker(marker, rand):
    """Draw a definite piece for one marker using a uniform [0, 1) source."""
    if marker == EMPTY:
        return EMPTY
    draw = int(rand() * 100)
    return BLACK if draw < marker else WHITE
