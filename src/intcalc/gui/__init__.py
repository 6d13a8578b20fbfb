"""intcalc desktop GUI.

``view`` holds the ttkbootstrap widgets and the entry adapter, ``controller``
routes key presses, pastes and button actions into the form model.  Launch the
window with the `intcalc-gui` console-script or `python -m intcalc`.
"""

__all__ = ["controller", "view"]
