from geotree import Position


def square(x=0.0, y=0.0, size=1.0):
    """A closed, counter-clockwise square ring with its corner at (x, y)"""
    return (
        Position(x, y),
        Position(x + size, y),
        Position(x + size, y + size),
        Position(x, y + size),
        Position(x, y),
    )


def rotate_ring(ring, n):
    """Start a closed ring ``n`` positions later, keeping it closed"""
    body = ring[:-1]
    n %= len(body)
    body = body[n:] + body[:n]
    return body + body[:1]


def reverse_ring(ring):
    return ring[::-1]
