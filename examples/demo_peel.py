from cg2d.peel import cluster_peel, peel

if __name__ == "__main__":
    rings = []
    for r in (10, 20, 30):
        rings += [(50 - r, 50), (50 + r, 50), (50, 50 - r), (50, 50 + r)]
    rings.append((50, 51))

    res = peel(rings)
    print(f"Peel completed with {len(rings)} points and {len(res.edges)} edges "
          f"in {len(res.layers)} layers, {res.remaining} left.")

    edges = cluster_peel(rings, cluster_count=3)
    print(f"Cluster peel: {len(edges)} edges.")
