import click

from id3tree.data_loader import format_dataset, load_dataset
from id3tree.decision_tree import accuracy_report
from id3tree.entropy import conditional_entropies, information_gains
from id3tree.errors import ID3Error
from id3tree.learner import ID3Learner, select_split_attribute
from id3tree.utils import Timer
from id3tree.visualizer import TreeVisualizer


def _load(path):
    try:
        return load_dataset(path)
    except ID3Error as e:
        raise click.ClickException(str(e)) from e


@click.group()
def cli():
    """ID3 decision tree learner for boolean data"""
    pass


@cli.command()
@click.argument('train_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('test_file', type=click.Path(exists=True, dir_okay=False))
@click.option('-v', '--verbose', is_flag=True, help='Print every split decision')
@click.option('--dot', is_flag=True, help='Print the tree in Graphviz DOT format')
def learn(train_file, test_file, verbose, dot):
    """Learn a tree from TRAIN_FILE and report accuracy on both files"""

    train_data = _load(train_file)
    test_data = _load(test_file)
    if test_data.attribute_names != train_data.attribute_names:
        raise click.ClickException(
            f"{test_file} has attributes {list(test_data.attribute_names)}, "
            f"expected {list(train_data.attribute_names)} as in {train_file}")

    learner = ID3Learner(train_data, verbose=verbose)
    timer = Timer("Tree learning")
    try:
        tree = learner.learn()
    except ID3Error as e:
        raise click.ClickException(str(e)) from e
    timer.stop()

    if verbose:
        click.echo(f"\n===== RESULTS =====")
        click.echo(f"Depth: {tree.depth}")
        click.echo(f"Nodes: {tree.num_nodes}")
        click.echo(f"Leaves: {tree.num_leaves}")
        click.echo(str(timer))
        click.echo()

    visualizer = TreeVisualizer(tree)
    click.echo(visualizer.to_dot() if dot else visualizer.to_text())
    click.echo(accuracy_report(tree.root, train_data, test_data))


@cli.command()
@click.argument('csv_file', type=click.Path(exists=True, dir_okay=False))
def gain(csv_file):
    """Print conditional entropy and information gain of every attribute"""

    data = _load(csv_file)
    if len(data) == 0:
        raise click.ClickException(f"{csv_file} has no observations")
    if data.num_attributes == 0:
        raise click.ClickException(f"{csv_file} has no attributes")

    entropies = conditional_entropies(data)
    gains = information_gains(data)

    width = max([len('Attribute')] + [len(name) for name in data.attribute_names])
    click.echo(f"{'Attribute':<{width}}  {'H(Y|X)':>8}  {'Gain':>8}")
    for name, h, g in zip(data.attribute_names, entropies, gains):
        click.echo(f"{name:<{width}}  {h:>8.4f}  {g:>8.4f}")

    click.echo(f"Split on: {data.attribute_names[select_split_attribute(data)]}")


@cli.command()
@click.argument('csv_file', type=click.Path(exists=True, dir_okay=False))
def show(csv_file):
    """Print a data file as it was parsed"""
    click.echo(format_dataset(_load(csv_file)), nl=False)


if __name__ == '__main__':
    cli()
