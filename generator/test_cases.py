"""
Graph-generation configurations used by ``compare_algorithms.py``.

Each set targets the regime of one group of solvers:

- unit weights: BFS against both Dijkstra variants
- nonnegative random weights: binary-heap against pairing-heap Dijkstra
- many ties on a grid: tie handling in both Dijkstra variants
- DAGs with negative weights: topological solver against the
  negative-weight solver
- the deterministic exponent graph

Each test case is a dictionary of keyword arguments compatible with
``generate_graph(...)``.
"""

SIZES = [1_000, 10_000]
SEEDS = [0, 1]

# Common settings applied to all tests
COMMON = dict(
    source=0,
    ensure_weakly_connected=True,
    allow_self_loops=False,
)

# -------------------------------------------------------------------
# A: Unit weights (Erdős–Rényi, sparse)
# -------------------------------------------------------------------

TEST_A_UNIT = [
    dict(n=n, m=4 * n, graph_type="erdos_renyi", weight_dist="unit", seed=seed, **COMMON)
    for n in SIZES
    for seed in SEEDS
]

# -------------------------------------------------------------------
# B: Nonnegative weights (Erdős–Rényi, uniform)
# -------------------------------------------------------------------

TEST_B_NONNEGATIVE = [
    dict(
        n=n,
        m=4 * n,
        graph_type="erdos_renyi",
        weight_dist="uniform",
        w_min=0,
        w_max=1_000,
        seed=seed,
        **COMMON,
    )
    for n in SIZES
    for seed in SEEDS
]

# -------------------------------------------------------------------
# C: Ties (grid, small integer weights)
# -------------------------------------------------------------------

TEST_C_GRID = [
    dict(
        n=n,
        m=None,  # natural grid edges only
        graph_type="grid",
        weight_dist="small_int",
        w_min=1,
        w_max=10,
        seed=seed,
        **COMMON,
    )
    for n in SIZES
    for seed in SEEDS
]

# -------------------------------------------------------------------
# D: DAG with negative weights
# -------------------------------------------------------------------

TEST_D_NEGATIVE_DAG = [
    dict(
        n=n,
        m=4 * n,
        graph_type="dag",
        weight_dist="uniform",
        w_min=-50,
        w_max=100,
        allow_negative=True,
        seed=seed,
        **COMMON,
    )
    for n in SIZES
    for seed in SEEDS
]

# -------------------------------------------------------------------
# E: Exponent graph
# -------------------------------------------------------------------

TEST_E_EXPONENT = [dict(n=1_000, graph_type="exponent")]

# -------------------------------------------------------------------
# Convenience collections
# -------------------------------------------------------------------

ALL_TEST_SETS = {
    "A_unit": TEST_A_UNIT,
    "B_nonnegative": TEST_B_NONNEGATIVE,
    "C_grid": TEST_C_GRID,
    "D_negative_dag": TEST_D_NEGATIVE_DAG,
    "E_exponent": TEST_E_EXPONENT,
}

# Flattened list (useful for simple runners)
ALL_TEST_CASES = [
    case
    for cases in ALL_TEST_SETS.values()
    for case in cases
]
