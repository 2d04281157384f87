"""Points, neighbour offsets and bounds checks for 2D/3D integer grids."""

# Order matters: the default neighbour generator yields offsets in this order.
NB_4 = [(0, -1), (-1, 0), (1, 0), (0, 1)]
DIAGONALS = [(-1, -1), (1, -1), (-1, 1), (1, 1)]
NB_5 = NB_4 + [(0, 0)]
NB_8 = NB_4 + DIAGONALS
NB_9 = NB_8 + [(0, 0)]
NB_3D = [(-1, 0, 0), (1, 0, 0), (0, -1, 0), (0, 1, 0), (0, 0, -1), (0, 0, 1)]

OFFSETS = {4: NB_4, 5: NB_5, 6: NB_3D, 8: NB_8, 9: NB_9}


def pt_add(a, b):
    """Sum of two points."""
    return tuple(x + y for x, y in zip(a, b))


def pt_sub(a, b):
    """Difference between two points."""
    return tuple(x - y for x, y in zip(a, b))


def pt_mul(magnitude, pt):
    """Multiply each coordinate of a point by `magnitude`."""
    return tuple(magnitude * x for x in pt)


def left_turn(direction):
    # positive y goes down
    x, y = direction
    return (y, -x)


def right_turn(direction):
    x, y = direction
    return (-y, x)


def manhattan(a, b=None):
    """Manhattan distance between two points, or of a point from the origin."""
    if b is None:
        return sum(abs(x) for x in a)
    return sum(abs(x - y) for x, y in zip(a, b))


def inside(size, pt):
    """Check if a point is inside a square/cube of a given size."""
    return all(0 <= c < size for c in pt)


def inside_xy(size_x, size_y, pt):
    """Check if a 2D point is inside a `size_x` by `size_y` rectangle."""
    x, y = pt[0], pt[1]
    return 0 <= x < size_x and 0 <= y < size_y


def inside_axes(sizes, pt):
    """Per-axis bounds check, `sizes` holds one size per coordinate."""
    return all(0 <= c < s for c, s in zip(pt, sizes))


def neighbours(amount, pt, pred=None):
    """4/5/8/9 neighbours of a 2D point (6 for a 3D point).

    Only the neighbours satisfying `pred` are returned.
    """
    try:
        offsets = OFFSETS[amount]
    except KeyError:
        raise ValueError(f"Unsupported neighbour count: {amount}") from None
    candidates = [pt_add(pt, d) for d in offsets]
    if pred is None:
        return candidates
    return [nb for nb in candidates if pred(nb)]


def neighbours_3d(pt, pred=None):
    """Six neighbours of a 3D point, two in each direction."""
    return neighbours(6, pt, pred)


def _char_pred(pred):
    if callable(pred):
        return pred
    return lambda ch: ch in pred


def grid_to_point_map(lines, pred):
    """Convert rows of characters to a {(x, y): char} dict.

    Keeps only characters satisfying `pred` (a callable or a container).
    """
    keep = _char_pred(pred)
    return {
        (x, y): ch
        for y, line in enumerate(lines)
        for x, ch in enumerate(line)
        if keep(ch)
    }


def grid_to_point_set(lines, pred):
    """Same as `grid_to_point_map`, keeping only the coordinates."""
    return set(grid_to_point_map(lines, pred))


def show_grid(points):
    """Render a set/map of 2D points as printable lines."""
    points = set(points)
    if not points:
        return ""
    x_lim = max(p[0] for p in points) + 1
    y_lim = max(p[1] for p in points) + 1
    return "\n".join(
        "".join("█" if (x, y) in points else " " for x in range(x_lim))
        for y in range(y_lim)
    )
