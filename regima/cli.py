"""
Command line entry points.

- regima-build: build the static site
- regima-gateway: run the mock gateway with uvicorn
- regima-cognitive: drive the cognitive layer against built pages
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from regima.utils.log import configure_logging

logger = logging.getLogger("regima.cli")


def build_main(argv: Optional[List[str]] = None) -> int:
    from regima.builder import BuildError, SiteBuilder, SitePaths

    parser = argparse.ArgumentParser(description="Build the RégimA Zone static site.")
    parser.add_argument("--root", type=Path, help="Project root holding content/, templates/ and assets/.")
    parser.add_argument("--public", type=Path, help="Output directory (default: <root>/public).")
    parser.add_argument("--no-clean", action="store_true", help="Keep existing files in the output directory.")
    args = parser.parse_args(argv)

    configure_logging()
    paths = SitePaths.from_env()
    if args.root:
        paths = SitePaths(root=args.root.resolve(), public_dir=(args.public or args.root / "public").resolve())
    elif args.public:
        paths = SitePaths(root=paths.root, public_dir=args.public.resolve())

    try:
        result = SiteBuilder(paths=paths).build(clean=not args.no_clean)
    except BuildError as exc:
        logger.error("Build failed: %s", exc)
        return 1
    logger.info("Wrote %d page(s) to %s", len(result.pages), paths.public_dir)
    return 0


def gateway_main(argv: Optional[List[str]] = None) -> int:
    import uvicorn

    from regima.gateway.config import GatewayConfigError, GatewaySettings, load_gateway_config

    parser = argparse.ArgumentParser(description="Run the RegimAI mock gateway.")
    parser.add_argument("--config", type=Path, help="Path to gateway.json.")
    parser.add_argument("--host", help="Bind address (default: GATEWAY_HOST or 0.0.0.0).")
    parser.add_argument("--port", type=int, help="Port (default: PORT or 8080).")
    args = parser.parse_args(argv)

    level_name = configure_logging()
    try:
        config = load_gateway_config(args.config)
    except GatewayConfigError as exc:
        logger.error("Failed to initialize gateway: %s", exc)
        return 1

    from regima.gateway.main import create_app

    settings = GatewaySettings.from_env()
    host = args.host or settings.host
    port = args.port or settings.port
    app = create_app(config=config, settings=settings)

    logger.info("%s running at http://localhost:%s", config.gateway.name, port)
    logger.info("Documentation: http://localhost:%s/docs", port)
    logger.info("Metrics: http://localhost:%s/metrics", port)
    logger.info("Health: http://localhost:%s/health", port)
    uvicorn.run(app, host=host, port=port, log_level=level_name.lower())
    return 0


def cognitive_main(argv: Optional[List[str]] = None) -> int:
    from regima.cognitive import CognitiveLayer, LocalStorage
    from regima.cognitive.ingest import ingest_directory

    parser = argparse.ArgumentParser(description="SkinTwin cognitive layer tools.")
    parser.add_argument("--storage", type=Path, help="Storage file (default: COGNITIVE_STORAGE_PATH).")
    sub = parser.add_subparsers(dest="command", required=True)

    ingest = sub.add_parser("ingest", help="Extract knowledge from built pages.")
    ingest.add_argument("public_dir", type=Path)
    ingest.add_argument("--reset", action="store_true", help="Clear stored knowledge first.")

    query = sub.add_parser("query", help="Reason over stored knowledge.")
    query.add_argument("term")

    sub.add_parser("patterns", help="Mine patterns from stored knowledge.")
    sub.add_parser("graph", help="Print the stored knowledge graph.")

    visit = sub.add_parser("visit", help="Record a page visit and predict the next pages.")
    visit.add_argument("path")

    args = parser.parse_args(argv)
    configure_logging()

    layer = CognitiveLayer(storage=LocalStorage(args.storage) if args.storage else None)
    if args.command == "ingest":
        if args.reset:
            layer.storage.clear()
        try:
            output = ingest_directory(layer, args.public_dir)
        except FileNotFoundError as exc:
            logger.error("%s", exc)
            return 1
    elif args.command == "query":
        output = layer.query(args.term)
    elif args.command == "patterns":
        output = layer.mine_patterns()
    elif args.command == "graph":
        output = layer.get_knowledge_graph()
    else:
        output = layer.predict_user_journey(args.path)

    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(build_main())
