# Outcome Builders
# Small constructors for the outcomes of the classic examples: dice, playing
# cards and colored balls in an urn. Every outcome is a distinct hashable label.

# ranks from high to low, 'T' is ten, so every rank is one character
RANKS = 'AKQJT98765432'
SUITS = '♥♠♦♣'


def die(sides=6):
    '''sample space of one roll of a fair die with the given number of sides'''
    if sides < 1:
        raise ValueError(f'a die needs at least one side, got {sides}')
    return set(range(1, sides + 1))


def make_deck(ranks=RANKS, suits=SUITS):
    '''list of rank+suit card labels, e.g. 'J♥' for the Jack of Hearts; 52 cards by default'''
    return [r + s for s in suits for r in ranks]


def balls(color, n):
    '''n distinctly labeled balls of the given color, e.g. balls('B', 3) -> ['B1', 'B2', 'B3'].
    A set cannot hold six equal 'B's, so each ball gets its own number.'''
    if n < 0:
        raise ValueError(f'number of balls must be non-negative, got {n}')
    return [color + str(i) for i in range(1, n + 1)]


def make_urn(**counts):
    '''urn contents from color counts, make_urn(B=6, R=9, W=8) -> ['B1', ..., 'W8']'''
    urn = []
    for color, n in counts.items():
        urn += balls(color, n)
    return urn
