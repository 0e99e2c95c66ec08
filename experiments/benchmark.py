import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent / 'src'))
sys.path.append(str(Path(__file__).parent.parent))

from demo import create_sample_data, train_test_split
from id3tree.learner import ID3Learner
from id3tree.utils import Timer, Statistics


def benchmark_noise(noise: float, n_runs: int = 10, n_samples: int = 300):
    """Average test accuracy of ID3 over several random datasets"""
    print(f"\n=== Label noise {noise:.0%} ===")

    stats_accuracy = Statistics("Accuracy (%)")
    stats_train = Statistics("Train accuracy (%)")
    stats_time = Statistics("Time (ms)")
    stats_depth = Statistics("Depth")
    stats_nodes = Statistics("Nodes")

    for run in range(n_runs):
        data = create_sample_data(n_samples=n_samples, noise=noise, seed=run)
        train_data, test_data = train_test_split(data, seed=run)

        learner = ID3Learner(train_data)
        timer = Timer()
        tree = learner.learn()
        time_ms = timer.stop() * 1000

        stats_accuracy.add(tree.evaluate(test_data))
        stats_train.add(tree.evaluate(train_data))
        stats_time.add(time_ms)
        stats_depth.add(tree.depth)
        stats_nodes.add(tree.num_nodes)

    for stats in (stats_accuracy, stats_train, stats_depth, stats_nodes, stats_time):
        print(stats)


def main():
    """Run benchmarks"""
    for noise in (0.0, 0.05, 0.1, 0.2):
        benchmark_noise(noise)


if __name__ == "__main__":
    main()
