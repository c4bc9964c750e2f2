import argparse
import os
import sys
import time

import numpy as np
import pandas as pd

# --- 路径设置 ---
# 确保不安装也能找到 pathsearch 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pathsearch.types import Position, SearchStatus
from pathsearch.config import SearchConfig
from pathsearch.map.generator import GridGenerator
from pathsearch.planning.planners import AStarSearch
from pathsearch.planning.heuristics import (
    EuclideanHeuristic, ManhattanHeuristic, OctileHeuristic, WeightedHeuristic, ZeroHeuristic,
)

HEURISTICS = {
    'Zero': ZeroHeuristic(),
    'Euclidean': EuclideanHeuristic(),
    'Octile': OctileHeuristic(),
    'Manhattan': ManhattanHeuristic(),
    'Weighted(Octile,1.5)': WeightedHeuristic(OctileHeuristic(), 1.5),
}


def run_benchmark(densities, num_trials, size, seed_base, max_expansions=None):
    """
    每个密度生成 num_trials 张随机地图，所有启发式在同一张图上跑。
    :return: 每次运行一行的 DataFrame
    """
    start = Position(1, 1)
    goal = Position(size - 2, size - 2)
    search = AStarSearch(SearchConfig(max_expansions=max_expansions))

    rows = []
    for density in densities:
        for trial in range(num_trials):
            seed = seed_base + trial + int(density * 1000)
            for name, heuristic in HEURISTICS.items():
                # 同一个 seed 重新生成，保证各启发式看到的是同一张地图
                generator = GridGenerator(obstacle_density=density, clear_radius=1, seed=seed)
                model = generator.generate(size, size, keep_clear=[start, goal], heuristic=heuristic)
                t0 = time.perf_counter()
                result = search.search(model, start, goal)
                t1 = time.perf_counter()

                rows.append({
                    'Density': density,
                    'Trial': trial,
                    'Heuristic': name,
                    'Status': result.status.value,
                    'Cost': result.cost if result.status is SearchStatus.FOUND else np.nan,
                    'Expansions': result.stats.expansions,
                    'Updates': result.stats.updates,
                    'Time(ms)': (t1 - t0) * 1000,
                })
    return pd.DataFrame(rows)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    df = df.assign(Success=(df['Status'] == SearchStatus.FOUND.value).astype(float))
    summary = df.groupby(['Density', 'Heuristic']).agg(
        success_rate=('Success', 'mean'),
        mean_cost=('Cost', 'mean'),
        mean_expansions=('Expansions', 'mean'),
        mean_time_ms=('Time(ms)', 'mean'),
    ).reset_index()
    summary['success_rate'] *= 100
    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare A* heuristics on random grids")
    parser.add_argument('--densities', type=float, nargs='+', default=[0.0, 0.1, 0.2, 0.3])
    parser.add_argument('--trials', type=int, default=10)
    parser.add_argument('--size', type=int, default=60)
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--max-expansions', type=int, default=None)
    parser.add_argument('--output', default=os.path.join("logs", "heuristic_benchmark.csv"))
    args = parser.parse_args(argv)

    df = run_benchmark(args.densities, args.trials, args.size, args.seed, args.max_expansions)
    summary = summarize(df)

    print(summary.to_string(index=False, float_format=lambda v: f"{v:.2f}"))

    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    df.to_csv(args.output, index=False)
    print(f"\nRaw results saved to {args.output}")
    return summary


if __name__ == "__main__":
    main()
