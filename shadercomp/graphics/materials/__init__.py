from shadercomp.graphics.materials.simple import SimpleMaterial

__all__ = ["SimpleMaterial"]
