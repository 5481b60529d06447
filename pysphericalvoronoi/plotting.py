import matplotlib.pyplot as plt
from typing import Any, Optional, Sequence
from matplotlib.axes import Axes
from mpl_toolkits.mplot3d import Axes3D  # noqa
import numpy as np
import plotly.graph_objects as go
from pysphericalvoronoi.GreatCircleSegment import GreatCircleSegment
from pysphericalvoronoi.SphericalPolygon import SphericalPolygon


def _sphere_mesh():
    u, v = np.mgrid[0:2*np.pi:60j, 0:np.pi:30j]
    xs = np.cos(u) * np.sin(v)
    ys = np.sin(u) * np.sin(v)
    zs = np.cos(v)
    return xs, ys, zs


def _segment_end_points(segments: Sequence[GreatCircleSegment]) -> np.ndarray:
    if len(segments) == 0:
        return np.empty((0, 3))
    return np.array([
        p.to_cartesian().to_array()
        for seg in segments
        for p in (seg.start, seg.end)
    ])


def plot_great_circle_segments(
    segments: Sequence[GreatCircleSegment],
    title: str = "Great Circle Segments",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    points: Optional[np.ndarray] = None,
    marker_size: float = 5,
    marker_color: Any = "black",
    marker_symbol: Optional[str] = "circle",
    line_width: float = 1.5,
    line_color: Any = "blue",
    line_style: str = "-"
):
    """
    Visualize great circle segments on the unit sphere using either Matplotlib or Plotly.

    Parameters
    ----------
    segments : Sequence[GreatCircleSegment]
        The arcs to draw.
    title : str, optional
        Title of the plot. Default is "Great Circle Segments".
    fig : plotly.graph_objects.Figure, optional
        A Plotly figure to add to. If None, a new figure is created.
    ax : matplotlib.axes.Axes, optional
        A Matplotlib 3D axis object to plot on. If provided, Matplotlib is used.
    points : np.ndarray, optional
        An (N, 3) array of points to mark. Defaults to the arc end points.
    marker_size : float, optional
        Size of the point markers. Default is 5.
    marker_color : Any, optional
        Color of the point markers. Default is "black".
    marker_symbol : str, optional
        Marker style for Plotly (e.g., "circle", "square"). Ignored in Matplotlib.
    line_width : float, optional
        Width of the arcs. Default is 1.5.
    line_color : Any, optional
        Color of the arcs. Default is "blue".
    line_style : str, optional
        Line style for Matplotlib (e.g., "-", "--"). Ignored in Plotly.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis object used for plotting.
    """

    pts = _segment_end_points(segments) if points is None else np.asarray(points, dtype=float)

    if ax is not None:
        ax.set_title(title)
        ax.set_box_aspect([1, 1, 1])
        ax.grid(False)

        xs, ys, zs = _sphere_mesh()
        ax.plot_surface(xs, ys, zs, color="lightgrey", alpha=0.15, linewidth=0)

        for seg in segments:
            arc_pts = seg.interpolate()
            ax.plot(arc_pts[:, 0], arc_pts[:, 1], arc_pts[:, 2],
                    color=line_color, linewidth=line_width, linestyle=line_style)

        if len(pts):
            ax.scatter(pts[:, 0], pts[:, 1], pts[:, 2], color=marker_color, s=marker_size**2)

        return ax

    return _plot_great_circle_segments_plotly(
        segments, pts, title, fig,
        marker_size, marker_color, marker_symbol,
        line_width, line_color
    )


def _plot_great_circle_segments_plotly(
    segments: Sequence[GreatCircleSegment],
    pts: np.ndarray,
    title: str,
    fig: Optional[go.Figure],
    marker_size: float,
    marker_color: Any,
    marker_symbol: Optional[str],
    line_width: float,
    line_color: Any
):
    """
    Internal helper to render great circle segments using Plotly.

    Returns
    -------
    plotly.graph_objects.Figure
        The updated or newly created Plotly figure.
    """

    if fig is None:
        fig = go.Figure()

        xs, ys, zs = _sphere_mesh()
        fig.add_trace(go.Surface(
            x=xs, y=ys, z=zs,
            opacity=0.15,
            showscale=False,
            colorscale='Greys',
            name='Sphere'
        ))

    for seg in segments:
        arc_pts = seg.interpolate()
        fig.add_trace(go.Scatter3d(
            x=arc_pts[:, 0], y=arc_pts[:, 1], z=arc_pts[:, 2],
            mode='lines',
            line=dict(color=line_color, width=line_width),
            showlegend=False
        ))

    if len(pts):
        fig.add_trace(go.Scatter3d(
            x=pts[:, 0], y=pts[:, 1], z=pts[:, 2],
            mode='markers',
            marker=dict(size=marker_size, color=marker_color, symbol=marker_symbol),
            name='Points'
        ))

    fig.update_layout(
        title=title,
        scene=dict(xaxis=dict(showgrid=False),
                   yaxis=dict(showgrid=False),
                   zaxis=dict(showgrid=False),
                   aspectmode='data'),
        margin=dict(l=0, r=0, b=0, t=30)
    )
    return fig


def plot_spherical_polygon(
    polygon: SphericalPolygon,
    title: str = "Spherical Polygon",
    fig: Optional[go.Figure] = None,
    ax: Optional[Axes] = None,
    line_width: float = 1.5,
    line_color: Any = "red",
    line_style: str = "-",
    marker_size: float = 5,
    marker_color: Any = "black",
    marker_symbol: Optional[str] = "circle"
):
    """
    Visualize the boundary of a spherical polygon using either Matplotlib or Plotly.

    Parameters
    ----------
    polygon : SphericalPolygon
        The polygon whose edges and vertices are drawn.
    title : str, optional
        Plot title. Default is "Spherical Polygon".
    fig : plotly.graph_objects.Figure, optional
        Existing Plotly figure to modify. A new one is created if None.
    ax : matplotlib.axes.Axes, optional
        Existing Matplotlib 3D axis to plot on. If provided, Matplotlib is used.
    line_width : float, optional
        Width of the edges. Default is 1.5.
    line_color : Any, optional
        Color of the edges. Default is "red".
    line_style : str, optional
        Line style for Matplotlib (e.g., "-", "--"). Ignored in Plotly.
    marker_size : float, optional
        Size of vertex markers. Default is 5.
    marker_color : Any, optional
        Color of the vertex markers. Default is "black".
    marker_symbol : str, optional
        Plotly marker style (e.g., "circle", "cross"). Ignored in Matplotlib.

    Returns
    -------
    plotly.graph_objects.Figure or matplotlib.axes.Axes
        The figure or axis used for plotting.
    """

    vertices = np.array([v.to_cartesian().to_array() for v in polygon.vertices])
    return plot_great_circle_segments(
        polygon.edges,
        title=title,
        fig=fig,
        ax=ax,
        points=vertices,
        marker_size=marker_size,
        marker_color=marker_color,
        marker_symbol=marker_symbol,
        line_width=line_width,
        line_color=line_color,
        line_style=line_style
    )


def show_plot(result) -> None:
    """Display the object returned by one of the plotting functions."""
    if isinstance(result, go.Figure):
        result.show()
    else:
        plt.show()
