"""
Harmonic Sphere Viewer

This module draws a HarmonicSphere with matplotlib and provides an
interactive window with degree and order sliders and an auto-rotating
camera.

matplotlib is an optional dependency (install the "viewer" extra).
"""

import logging
import threading
from typing import Optional

from .config import ShvizConfig, MAX_DEGREE, default_config
from .controls import DebouncedParameterController
from .core import HarmonicSphere
from .exceptions import RenderError
from .utils import HarmonicParameters

logger = logging.getLogger(__name__)

# Upper bound on rendered rows/columns; denser meshes are subsampled by matplotlib
MAX_RENDER_COUNT = 256


def _require_pyplot():
    try:
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise RenderError("matplotlib is required for rendering; install shviz[viewer]") from e
    return plt


def _plot_sphere(ax, sphere: HarmonicSphere):
    """Add the colored sphere to a 3D axes and return the surface."""
    mesh = sphere.mesh
    x = mesh.as_grid(mesh.vertices[:, 0])
    y = mesh.as_grid(mesh.vertices[:, 1])
    z = mesh.as_grid(mesh.vertices[:, 2])
    colors = mesh.as_grid(sphere.colors)
    
    rows, cols = mesh.grid_shape
    
    # The mesh is y-up; matplotlib draws z-up
    return ax.plot_surface(
        x, z, y,
        facecolors=colors,
        rcount=min(rows, MAX_RENDER_COUNT),
        ccount=min(cols, MAX_RENDER_COUNT),
        linewidth=0,
        antialiased=False,
        shade=False
    )


def _style_axes(ax, sphere: HarmonicSphere, config: ShvizConfig) -> None:
    radius = config.mesh.radius
    ax.set_xlim(-radius, radius)
    ax.set_ylim(-radius, radius)
    ax.set_zlim(-radius, radius)
    ax.set_box_aspect((1, 1, 1))
    ax.set_axis_off()
    ax.set_facecolor(config.viewer.background)
    ax.set_title(f"$Y_{{{sphere.degree},{sphere.order}}}$")


def render_harmonic(sphere: HarmonicSphere, ax=None, config: Optional[ShvizConfig] = None):
    """
    Draw a harmonic sphere.
    
    Args:
        sphere: The sphere to draw
        ax: Existing 3D axes to draw into, a new figure is created if None
        config: Configuration, defaults to the sphere's own
        
    Returns:
        The matplotlib figure
    
    Raises:
        RenderError: If matplotlib is not installed
    """
    plt = _require_pyplot()
    config = config or sphere.config
    
    if ax is None:
        fig = plt.figure(figsize=config.viewer.figure_size, facecolor=config.viewer.background)
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure
    
    _plot_sphere(ax, sphere)
    _style_axes(ax, sphere, config)
    ax.view_init(elev=config.viewer.elevation, azim=-60.0)
    return fig


def save_harmonic(sphere: HarmonicSphere, file_path: str, config: Optional[ShvizConfig] = None,
                  dpi: int = 100) -> None:
    """Render a harmonic sphere to an image file."""
    plt = _require_pyplot()
    fig = render_harmonic(sphere, config=config)
    try:
        fig.savefig(file_path, dpi=dpi, facecolor=fig.get_facecolor())
    except (OSError, ValueError) as e:
        raise RenderError(f"Could not save {file_path}: {e}") from e
    finally:
        plt.close(fig)
    logger.info(f"Saved {sphere.parameters} to {file_path}")


class HarmonicViewer:
    """
    Interactive viewer with degree and order sliders.
    
    Slider edits go through a DebouncedParameterController. Its commits
    arrive on a timer thread and are only recorded there; the redraw
    happens in the animation callback on the GUI thread.
    """
    
    def __init__(self, sphere: Optional[HarmonicSphere] = None,
                 config: Optional[ShvizConfig] = None):
        """
        Initialize the viewer
        
        Args:
            sphere: Sphere to show, a default one is built if None
            config: Visualizer configuration
        """
        plt = _require_pyplot()
        from matplotlib.widgets import Slider
        
        self.config = config or (sphere.config if sphere is not None else default_config)
        self.sphere = sphere or HarmonicSphere(config=self.config)
        viewer_config = self.config.viewer
        
        self.fig = plt.figure(figsize=viewer_config.figure_size, facecolor=viewer_config.background)
        self.ax = self.fig.add_axes([0.0, 0.15, 1.0, 0.85], projection='3d')
        
        degree_ax = self.fig.add_axes([0.25, 0.08, 0.5, 0.03])
        order_ax = self.fig.add_axes([0.25, 0.03, 0.5, 0.03])
        self.degree_slider = Slider(degree_ax, 'l', 0, MAX_DEGREE,
                                    valinit=self.sphere.degree, valstep=1)
        self.order_slider = Slider(order_ax, 'm', -MAX_DEGREE, MAX_DEGREE,
                                   valinit=self.sphere.order, valstep=1)
        self._set_order_range(self.sphere.degree)
        
        self.controller = DebouncedParameterController(
            self._on_commit, delay=viewer_config.debounce_delay,
            initial=self.sphere.parameters
        )
        self.degree_slider.on_changed(self._on_degree_changed)
        self.order_slider.on_changed(self._on_order_changed)
        
        self._pending_lock = threading.Lock()
        self._pending: Optional[HarmonicParameters] = None
        
        self.azimuth = -60.0
        self.animation = None
        self.interval = 50  # milliseconds
        
        self._surface = None
        self._draw_surface()
    
    def _draw_surface(self) -> None:
        if self._surface is not None:
            self._surface.remove()
        self._surface = _plot_sphere(self.ax, self.sphere)
        _style_axes(self.ax, self.sphere, self.config)
        self.ax.view_init(elev=self.config.viewer.elevation, azim=self.azimuth)
    
    def _set_order_range(self, degree: int) -> None:
        """Bound the order slider to [-degree, degree]."""
        slider = self.order_slider
        slider.valmin = -degree
        slider.valmax = degree
        half_width = max(degree, 0.5)
        slider.ax.set_xlim(-half_width, half_width)
    
    def _sync_sliders(self, parameters: HarmonicParameters) -> None:
        # set_val re-enters the handlers; the controller leaves equal values alone
        if self.degree_slider.val != parameters.degree:
            self.degree_slider.set_val(parameters.degree)
        if self.order_slider.valmax != parameters.degree:
            self._set_order_range(parameters.degree)
        if self.order_slider.val != parameters.order:
            self.order_slider.set_val(parameters.order)
    
    def _on_degree_changed(self, value) -> None:
        self._sync_sliders(self.controller.set_degree(int(value)))
    
    def _on_order_changed(self, value) -> None:
        self._sync_sliders(self.controller.set_order(int(value)))
    
    def _on_commit(self, parameters: HarmonicParameters) -> None:
        with self._pending_lock:
            self._pending = parameters
    
    def update(self, frame):
        """Animation callback: apply committed parameters and rotate the camera."""
        with self._pending_lock:
            parameters, self._pending = self._pending, None
        
        if parameters is not None and self.sphere.set_parameters(parameters.degree, parameters.order):
            self._draw_surface()
        
        viewer_config = self.config.viewer
        if viewer_config.auto_rotate:
            step = viewer_config.rotate_speed * self.interval / 1000.0
            self.azimuth = (self.azimuth + step) % 360.0
            self.ax.view_init(elev=viewer_config.elevation, azim=self.azimuth)
        
        return []
    
    def show(self) -> None:
        """Open the window and block until it is closed."""
        plt = _require_pyplot()
        from matplotlib.animation import FuncAnimation
        
        logger.info(f"Showing {self.sphere.parameters}")
        self.animation = FuncAnimation(
            self.fig, self.update, interval=self.interval,
            blit=False, cache_frame_data=False
        )
        plt.show()
        
        # After the window is closed
        self.controller.cancel()
        self.animation = None
    
    def close(self) -> None:
        """Cancel pending updates and close the figure."""
        plt = _require_pyplot()
        self.controller.cancel()
        plt.close(self.fig)
