"""
Parameter Controls

Debounced degree/order controller. Slider edits update a draft immediately,
and the draft is delivered to the renderer only after the sliders have been
still for the debounce delay, so dragging a slider does not re-color the
sphere on every intermediate value.
"""

import logging
import threading
from typing import Callable, Optional

from .config import DEFAULT_DEBOUNCE_DELAY, DEFAULT_DEGREE, DEFAULT_ORDER
from .exceptions import ValidationError
from .utils import HarmonicParameters

logger = logging.getLogger(__name__)


class DebouncedParameterController:
    """
    Holds draft and committed harmonic parameters.
    
    The callback runs on a timer thread unless the delay is zero, in which
    case every change is committed synchronously.
    """
    
    def __init__(self, callback: Callable[[HarmonicParameters], None],
                 delay: float = DEFAULT_DEBOUNCE_DELAY,
                 initial: Optional[HarmonicParameters] = None):
        """
        Initialize the controller.
        
        Args:
            callback: Called with the committed parameters
            delay: Debounce delay in seconds
            initial: Starting parameters, treated as already committed
        """
        if delay < 0:
            raise ValidationError("Debounce delay must be non-negative")
        
        self.callback = callback
        self.delay = delay
        
        initial = initial or HarmonicParameters(DEFAULT_DEGREE, DEFAULT_ORDER)
        self._draft = initial
        self._committed = initial
        
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
    
    @property
    def draft(self) -> HarmonicParameters:
        """Parameters currently shown on the sliders."""
        return self._draft
    
    @property
    def committed(self) -> HarmonicParameters:
        """Parameters last delivered to the callback."""
        return self._committed
    
    @property
    def pending(self) -> bool:
        """Whether a commit is scheduled."""
        with self._lock:
            return self._timer is not None
    
    def set_degree(self, degree: int) -> HarmonicParameters:
        """Move the degree slider; an order that no longer fits resets to 0."""
        with self._lock:
            self._draft = self._draft.with_degree(degree)
            draft = self._draft
        self._schedule()
        return draft
    
    def set_order(self, order: int) -> HarmonicParameters:
        """Move the order slider; the order is clamped to the draft degree."""
        with self._lock:
            self._draft = self._draft.with_order(order)
            draft = self._draft
        self._schedule()
        return draft
    
    def flush(self) -> None:
        """Commit the draft now, dropping any scheduled commit."""
        self._cancel_timer()
        self._commit()
    
    def cancel(self) -> None:
        """Drop the scheduled commit; the draft is kept."""
        self._cancel_timer()
    
    def _cancel_timer(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
    
    def _schedule(self) -> None:
        if self.delay == 0:
            self._commit()
            return
        
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._on_timer)
            self._timer.daemon = True
            self._timer.start()
    
    def _on_timer(self) -> None:
        with self._lock:
            if self._timer is not threading.current_thread():
                # Superseded by a later edit
                return
            self._timer = None
        self._commit()
    
    def _commit(self) -> None:
        with self._lock:
            parameters = self._draft
            if parameters == self._committed:
                return
            self._committed = parameters
        
        logger.debug(f"Committing {parameters}")
        self.callback(parameters)
