"""
Tests Package.

This package contains test suites for the diagram-motion implementation:
unit tests for the rendering-independent core (geometry, layout, topology,
emphasis mappings, compiler) and manim-backed tests for the mobjects, the
animated graph, emphasis transitions and the render runner. The manim-backed
suites skip themselves when manim or its text rendering is unavailable.
"""
