from enum import Enum


class NodeShape(str, Enum):
    BOX = "box"
    POLYGON = "polygon"
    ELLIPSE = "ellipse"
    OVAL = "oval"
    CIRCLE = "circle"
    POINT = "point"
    EGG = "egg"
    TRIANGLE = "triangle"
    PLAINTEXT = "plaintext"
    PLAIN = "plain"
    DIAMOND = "diamond"
    TRAPEZIUM = "trapezium"
    PARALLELOGRAM = "parallelogram"
    HOUSE = "house"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    SEPTAGON = "septagon"
    OCTAGON = "octagon"
    DOUBLECIRCLE = "doublecircle"
    DOUBLEOCTAGON = "doubleoctagon"
    TRIPLEOCTAGON = "tripleoctagon"
    INVTRIANGLE = "invtriangle"
    INVTRAPEZIUM = "invtrapezium"
    INVHOUSE = "invhouse"
    RECT = "rect"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    STAR = "star"
    NONE = "none"
    UNDERLINE = "underline"
    CYLINDER = "cylinder"
    NOTE = "note"
    TAB = "tab"
    FOLDER = "folder"
    BOX3D = "box3d"
    COMPONENT = "component"
    RECORD = "record"

    def __str__(self) -> str:
        return self.value


# Graphviz draws ellipses unless told otherwise, so this shape is never emitted.
DEFAULT_SHAPE = NodeShape.ELLIPSE
