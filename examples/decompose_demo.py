from cycledecomp.decompose import iter_disjoint_cycles
from cycledecomp.graph import demo_graph
from cycledecomp.utils.naming import format_path

G = demo_graph()
print("adjacency:")
print(G.format_adjacency())

for step in iter_disjoint_cycles(G):
    print(f"size {step.size}:", format_path(step.path))
