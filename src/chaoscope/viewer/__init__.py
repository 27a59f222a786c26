"""
pygame front end: window, input and drawing.
"""

from chaoscope.viewer.app import AttractorViewer
from chaoscope.viewer.renderer import SceneRenderer
