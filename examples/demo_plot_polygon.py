import numpy as np
from pysphericalvoronoi import (
    SphereCoordinate,
    GreatCircleSegment,
    SphericalPolygon,
    plot_great_circle_segments,
    plot_spherical_polygon,
    show_plot
)

# Two arcs crossing at (0, 0, 1)
arcs = [
    GreatCircleSegment(SphereCoordinate(np.pi / 2, 1.75 * np.pi), SphereCoordinate(np.pi / 2, np.pi / 4)),
    GreatCircleSegment(SphereCoordinate(np.pi / 4, 0), SphereCoordinate(0.75 * np.pi, 0)),
]
crossing = arcs[0].intersection(arcs[1])

# Irregular polygon over Europe, counter-clockwise, given in lat/lon degrees
latlon = [(36, -9), (38, 15), (45, 28), (60, 30), (70, 25), (58, 5), (43, -9)]
polygon = SphericalPolygon([SphereCoordinate.from_latlon(lat, lon) for lat, lon in latlon])
print(f"Polygon area: {polygon.area:.4f} sr, perimeter: {polygon.perimeter:.4f} rad")

fig = plot_great_circle_segments(
    arcs,
    title="Crossing arcs",
    points=np.array([crossing.to_cartesian().to_array()])
)
show_plot(fig)

fig = plot_spherical_polygon(polygon, title="Spherical polygon")
show_plot(fig)
