from .themed import ThemedSceneMixin
from .diagram import DiagramScene
