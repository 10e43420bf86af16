# examples/demo_model.py
import logging

from gmodel import Model, connected_components, to_arrays

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    m = Model()
    a = m.add_point(0, 0, 0, 1)
    b = m.add_point(1, 0, 0, 1)
    c = m.add_point(1, 1, 0, 1)
    d = m.add_point(-5, 2, 7, 1)
    m.add_line(a, b)
    m.add_line(b, c)
    m.add_line(c, a)

    print(m)
    print("Lines at b:", m.get_point_lines(b))
    print("Components:", connected_components(m))

    m.del_point(a)  # забирає лінії 1 та 3
    print("After del_point(a):", m)
    print("VALIDATION:", m.validate())  # застарілі хендли у b та c
    print("Dropped stale refs:", m.drop_stale_refs())

    handles, coords, segments = to_arrays(m)
    print("Handles:", handles)
    print("Coords:\n", coords)
    print("Segments:\n", segments)
