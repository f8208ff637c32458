EXAMPLE_HEX = (26, 121, 164, 214, 13, 230, 113, 142, 142, 91, 50, 110, 51, 138, 229, 51)

EXAMPLE_GRID = (
    (26, 0), (121, 1), (164, 2), (121, 3), (26, 4),
    (214, 5), (13, 6), (230, 7), (13, 8), (214, 9),
    (113, 10), (142, 11), (142, 12), (142, 13), (113, 14),
    (91, 15), (50, 16), (110, 17), (50, 18), (91, 19),
    (51, 20), (138, 21), (229, 22), (138, 23), (51, 24),
)

EXAMPLE_FILTERED_GRID = (
    (26, 0), (164, 2), (26, 4), (214, 5), (230, 7), (214, 9), (142, 11),
    (142, 12), (142, 13), (50, 16), (110, 17), (50, 18), (138, 21), (138, 23),
)

EXAMPLE_PIXEL_MAP = (
    ((0, 0), (50, 50)), ((100, 0), (150, 50)), ((200, 0), (250, 50)),
    ((0, 50), (50, 100)), ((100, 50), (150, 100)), ((200, 50), (250, 100)),
    ((50, 100), (100, 150)), ((100, 100), (150, 150)), ((150, 100), (200, 150)),
    ((50, 150), (100, 200)), ((100, 150), (150, 200)), ((150, 150), (200, 200)),
    ((50, 200), (100, 250)), ((150, 200), (200, 250)),
)
