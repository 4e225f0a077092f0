# objmesh/__main__.py
"""
Командная строка: python -m objmesh model.obj [--shared] [--output out.npz]
"""
import sys
from argparse import ArgumentParser

import numpy as np

from objmesh.loader import ObjParseError, parse_file
from objmesh.utils import Config, logger, set_level


def build_arg_parser():
    parser = ArgumentParser(prog="objmesh",
                            description="Convert an OBJ file into deduplicated mesh buffers.")
    parser.add_argument("path", help="OBJ file to load")
    parser.add_argument("--shared", action="store_true", default=None,
                        help="freeze the buffers so they can be shared")
    parser.add_argument("--config", default="objmesh.json", help="JSON configuration file")
    parser.add_argument("--output", "-o", help="save the buffers to this .npz file")
    parser.add_argument("--quiet", "-q", action="store_true", help="only log errors")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    cfg = Config(args.config)
    set_level("ERROR" if args.quiet else cfg["log_level"])

    try:
        mesh = parse_file(args.path, shared=args.shared, config=cfg)
    except (ObjParseError, OSError, UnicodeDecodeError) as exc:
        logger.error(f"[CLI] {exc}")
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"{mesh.name}: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles, "
          f"normals={'yes' if mesh.normals is not None else 'no'}, "
          f"texcoords={'yes' if mesh.texcoords is not None else 'no'}, "
          f"storage={mesh.storage.value}")

    if args.output:
        buffers = {"positions": mesh.positions, "triangles": mesh.triangles}
        if mesh.normals is not None:
            buffers["normals"] = mesh.normals
        if mesh.texcoords is not None:
            buffers["texcoords"] = mesh.texcoords
        np.savez(args.output, **buffers)
        logger.info(f"[CLI] Buffers saved to {args.output}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
