import asyncclick as click
import yaml
import os
from itertools import islice

from .successor import LatticePoint, STRATEGIES, get_strategy, walk, jitter_index, jitter_offset
from .util import attrdict, combine_dict, TimeOnlyFormatter

import logging
logger = logging.getLogger(__name__)

CFG_FILE = "jitterpack.cfg"

DEFAULT_CFG=attrdict(
        search=attrdict(
            successor="jitter",
            max_ring=None,
            checkpoint=64,
            restart=True,
            ),
        log=attrdict(
            level="info",
            ),
        )

CFG_HELP=attrdict(
        successor=_("Order in which to try positions"),
        max_ring=_("Give up beyond this distance (empty: never)"),
        checkpoint=_("Let other tasks run after this many positions"),
        restart=_("Start each search at the origin"),
        )


def load_config(fd=None):
    """
    Read a YAML config from this file and merge it with the defaults.
    """
    cfg = yaml.safe_load(fd) if fd is not None else None
    if cfg is not None and not isinstance(cfg, dict):
        raise ValueError("The config must be a mapping", cfg)
    return combine_dict(cfg, DEFAULT_CFG, cls=attrdict, force=True)


def setup_logging(cfg, debug=False):
    if 'logging' in cfg:
        from logging.config import dictConfig
        if debug:
            cfg['logging'].setdefault('root',{})['level'] = 'DEBUG'
        dictConfig(cfg['logging'])
    else:
        h = logging.StreamHandler()
        h.setFormatter(TimeOnlyFormatter("%(asctime)s %(levelname)s:%(name)s %(message)s"))
        logging.basicConfig(level=logging.DEBUG if debug else getattr(logging,cfg.log['level'].upper()), handlers=[h])


def parse_point(s) -> LatticePoint:
    """Parse "x,y" """
    try:
        x,y = s.split(",")
        return LatticePoint(int(x),int(y))
    except ValueError:
        raise ValueError("Not a point: %r" % (s,)) from None


def render_grid(r, strategy="jitter"):
    """
    Return the lines of a (2r+1)² square that shows the position of each
    point in the sequence. Y grows downwards.
    """
    if r < 0:
        raise ValueError("Radius must not be negative", r)
    st = get_strategy(strategy)
    seen = {}
    todo = (2*r+1)**2
    for n,p in enumerate(walk(successor=st.successor)):
        if max(abs(p.x),abs(p.y)) <= r:
            seen[p] = n
            if len(seen) == todo:
                break
    w = len(str(n))
    return [" ".join("%*d" % (w, seen[LatticePoint(x,y)]) for x in range(-r,r+1)) for y in range(-r,r+1)]


def _point_opt(ctx, param, value):
    try:
        return parse_point(value)
    except ValueError as exc:
        raise click.BadParameter(exc.args[0]) from None


@click.group()
@click.option("-c","--config", type=click.File("r"), help=_("Config file"))
@click.option("-d","--debug", is_flag=True, help=_("Debug output"))
@click.pass_context
async def main(ctx, config, debug):
    """
    Enumerate grid positions for packing polyominoes.
    """
    if config is None and os.path.exists(CFG_FILE):
        config = open(CFG_FILE,"r")
    try:
        cfg = load_config(config)
    finally:
        if config is not None:
            config.close()
    setup_logging(cfg, debug)
    ctx.obj = cfg


@main.command(name="walk")
@click.option("-n","--count", type=int, default=9, help=_("Number of points"))
@click.option("-s","--strategy", type=click.Choice(sorted(STRATEGIES)), help=_("Successor function"))
@click.option("--start", default="0,0", callback=_point_opt, help=_("First point, as X,Y"))
@click.pass_obj
async def walk_cmd(cfg, count, strategy, start):
    """
    Print successive positions.
    """
    st = get_strategy(strategy or cfg.search.successor)
    logger.debug("Walking %d from %s with %s", count, start, st.successor.__name__)
    for p in islice(walk(start, st.successor), count):
        click.echo("%d %d" % p)


@main.command()
@click.option("-r","--radius", type=int, default=2, help=_("Rings to show"))
@click.option("-s","--strategy", type=click.Choice(sorted(STRATEGIES)), help=_("Successor function"))
@click.pass_obj
async def render(cfg, radius, strategy):
    """
    Print the visiting order around the origin.
    """
    if radius < 0:
        raise click.BadParameter("must not be negative", param_hint="radius")
    for line in render_grid(radius, strategy or cfg.search.successor):
        click.echo(line)


@main.command()
@click.argument("what")
async def locate(what):
    """
    Print the index of X,Y in the jittery sequence, or the point at index N.

    A negative argument needs a preceding "--", e.g. "locate -- -1,-1".
    """
    if "," in what:
        try:
            p = parse_point(what)
        except ValueError as exc:
            raise click.BadParameter(exc.args[0]) from None
        click.echo(jitter_index(p))
        return
    try:
        n = int(what)
        p = jitter_offset(n)
    except ValueError as exc:
        raise click.BadParameter(exc.args[0]) from None
    click.echo(str(p))


if __name__ == "__main__":
    main()
