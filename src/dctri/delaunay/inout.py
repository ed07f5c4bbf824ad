"""Output of graphs as WKT, in ;-separated text files (e.g. for QGIS)
"""


def output_vertices(V, fh):
    """Output list of vertices as WKT to text file (for QGIS)"""
    fh.write("id;wkt;degree;info\n")
    for v in V:
        fh.write("{0};POINT({1});{2};{3}\n".format(
            v.graph_index, v, v.degree, v.info))


def output_edges(E, fh):
    """Output list of edges as WKT to text file (for QGIS)"""
    fh.write("id;start;end;wkt\n")
    for e in E:
        fh.write("{0};{1};{2};"
                 "LINESTRING({3}, {4})\n".format(
                    e.graph_index, e.start.graph_index, e.end.graph_index,
                    e.start, e.end))


def output_triangles(T, fh):
    """Output triangles (triples of vertices) as WKT to text file"""
    fh.write("id;wkt;v0;v1;v2\n")
    for i, (a, b, c) in enumerate(T):
        fh.write("{0};POLYGON(({1}, {2}, {3}, {1}));"
                 "{4};{5};{6}\n".format(
                    i, a, b, c,
                    a.graph_index, b.graph_index, c.graph_index))
