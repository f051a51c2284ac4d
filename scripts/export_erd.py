#!/usr/bin/env python3
"""
Write the ERD and the full schema of the configured database to files.
"""

import json
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.database import create_client, get_database
from config.settings import settings
from services.document_source import MongoDocumentSource
from services.erd_generator import ErdGenerator
from utils.logger import setup_logging, get_logger

logger = get_logger(__name__)

def export(generator: ErdGenerator, output_dir: Path) -> bool:
    """Write erd.mmd and full_schema.json into output_dir."""
    erd = generator.generate_erd(output_format="mermaid")
    if not erd["success"]:
        logger.error(erd["error"])
        return False
    
    schemas = generator.extract_schemas()
    if not schemas["success"]:
        logger.error(schemas["error"])
        return False
    
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / "erd.mmd").write_text(erd["diagram"], encoding="utf-8")
    with open(output_dir / "full_schema.json", "w", encoding="utf-8") as f:
        json.dump(schemas["schemas"], f, indent=4)
    
    logger.info(
        f"Exported {erd['stats']['collections']} collections and "
        f"{erd['stats']['relationships']} relationships to {output_dir}"
    )
    return True

def main():
    setup_logging(settings.LOG_LEVEL)
    client = create_client(settings.MONGODB_URI)
    try:
        source = MongoDocumentSource(get_database(client))
        ok = export(ErdGenerator(source), project_root)
    finally:
        client.close()
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
