from cycledecomp.decompose import decompose
from cycledecomp.graph import demo_graph
from cycledecomp.viz.draw import draw_decomposition

G = demo_graph()
res = decompose(G)
print("complete:", res.is_complete)
draw_decomposition(G, res, seed=7)
