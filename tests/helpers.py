def random_pixels(rng, width, height, density=0.5):
    return [[1 if rng.random() < density else 0 for _ in range(width)] for _ in range(height)]


def pixel_grid(img):
    return [list(img.row_pixels(y)) for y in range(img.height)]
