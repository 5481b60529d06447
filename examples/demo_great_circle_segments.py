import numpy as np
from pysphericalvoronoi import (
    CartesianVector,
    SphereCoordinate,
    GreatCircleSegment,
    SphericalPolygon
)

start1 = SphereCoordinate(np.pi / 2, 1.75 * np.pi)
end1 = SphereCoordinate(np.pi / 2, np.pi / 4)
start2 = SphereCoordinate(np.pi / 4, 0)
end2 = SphereCoordinate(0.75 * np.pi, 0)

for coord in (start1, end1, start2, end2):
    print(coord.to_cartesian())

arc1 = GreatCircleSegment(start1, end1)
arc2 = GreatCircleSegment(start2, end2)

print()
print(arc1.midpoint)
print(CartesianVector(0, 0, 2))
print(SphereCoordinate.from_cartesian(arc1.midpoint))
print(SphereCoordinate.from_cartesian(CartesianVector(0, 0, 2)))
print(SphereCoordinate.from_cartesian(arc1.midpoint).to_cartesian())
print()

intersection = arc1.intersection(arc2)
if intersection is not None:
    print(True, "  ", intersection, "  ", intersection.to_cartesian())
else:
    print(False)

print()
quarter_sphere = SphericalPolygon([
    SphereCoordinate(0, 0),
    SphereCoordinate(0.5 * np.pi, 0),
    SphereCoordinate(0.5 * np.pi, 0.5 * np.pi),
    SphereCoordinate(0.5 * np.pi, np.pi),
])
print("Size of quarter sphere polygon:", quarter_sphere.area)
print("Area of whole sphere:", 4 * np.pi)
print("Area of quarter sphere:", np.pi)
