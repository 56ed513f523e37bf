from utils import frozen_color

class Material:

    def __init__(self, color, specular=-1.):
        """
        Create a new material with the given parameters.

        Parameters:
          color : (3,) -- Base color, each channel in [0, 255]
          specular : float -- Specular exponent (shininess); <= 0 means no highlight
        """
        self.color = frozen_color(color)
        self.specular = float(specular)

    def __repr__(self):
        return f"Material(color={self.color.tolist()}, specular={self.specular})"
