import collections
import math

# coordinates closer than this are treated as the same point
EPSILON = 1e-4

class Vector2(collections.namedtuple('Vector2', ('x', 'y'))):
    """Immutable 2D vector with the arithmetic needed for spline blending.

    Vectors add and subtract with one another and scale by plain numbers:
        a = Vector2(1, 2)
        b = Vector2(0.5, 0)
        (a - b) * 2  # Vector2(x=1.0, y=4)

    Note that, unlike plain tuples, + does not concatenate and * does not repeat.
    """
    __slots__ = ()

    @classmethod
    def of(cls, point):
        """Make a Vector2 from any length-2 sequence (tuple, list, array row)."""
        x, y = point
        return cls(float(x), float(y))

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def magnitude(self):
        """Return the euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def approximately_equal(self, other, epsilon=EPSILON):
        """Return True if both coordinates differ by strictly less than epsilon.

        This is not transitive: a and b may each be close to c without being
        close to one another."""
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon


def as_vectors(points):
    """Convert a sequence of x,y points to a list of Vector2."""
    return [Vector2.of(point) for point in points]
