#!/usr/bin/env python3
"""
Slot Import Script

Import block slot layouts from an exported scene: 1 block → 8 variant layouts

Usage:
    python slot_import.py --scene data/scene.json --frame Blocks --id-diff 2
    python slot_import.py --scene data/scene.json --message data/message.json --output data/slots
"""

import argparse
import io
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from slot_generator import LayoutConfig, DEFAULT_CONFIG
from slot_generator.host import JsonScene, PluginMessage, MessageType, parse_message, handle_message
from slot_generator.host.plugin import IMPORT_ERRORS


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Import block slot layouts from a scene export")
    parser.add_argument("--scene", type=str, required=True, help="Scene JSON export")
    parser.add_argument("--frame", type=str, help="Name of the frame holding the blocks")
    parser.add_argument("--id-diff", type=int, default=0, help="Artboard id offset")
    parser.add_argument("--message", type=str, help="Plugin message JSON (replaces --frame/--id-diff)")
    parser.add_argument("--config", type=str, help="YAML file with layout geometry")
    parser.add_argument("--output", type=str, help="Output directory (default: print to stdout)")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    if not args.message and not args.frame:
        parser.error("one of --frame or --message is required")

    try:
        if args.message:
            message = parse_message(Path(args.message).read_text(encoding="utf-8"))
        else:
            message = PluginMessage(type=MessageType.IMPORT, frame_name=args.frame, id_diff=args.id_diff)
        config = LayoutConfig.from_yaml(args.config) if args.config else DEFAULT_CONFIG
    except ValueError as e:
        parser.error(str(e))

    sink = io.StringIO() if args.output else sys.stdout
    scene = JsonScene.load(args.scene, output=sink)

    try:
        result = handle_message(message, scene, config, progress=bool(args.output))
    except IMPORT_ERRORS as e:
        print(f"Import failed: {e}", file=sys.stderr)
        return 1

    if result is None or not args.output:
        return 0

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    with open(output_dir / "layouts.json", 'w') as f:
        json.dump(result.to_list(), f, indent=2)

    with open(output_dir / "summary.json", 'w') as f:
        json.dump({
            "generated_at": datetime.now().isoformat(),
            "frame": message.frame_name,
            "id_diff": message.id_diff,
            "found": result.found,
            "num_blocks": result.num_blocks,
            "num_layouts": len(result.layouts),
        }, f, indent=2)

    if result.found:
        print(f"Done! {len(result.layouts)} layouts -> {output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
