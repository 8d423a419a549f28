import json
import os
import sys

# Run from the repository root so "app" is importable
sys.path.append(os.getcwd())

from app.main import app


def generate_openapi(output_file="openapi.json"):
    print(f"Generating OpenAPI schema for {app.title}...")
    openapi_schema = app.openapi()

    with open(output_file, "w") as f:
        json.dump(openapi_schema, f, indent=2)

    paths = len(openapi_schema.get("paths", {}))
    print(f"OpenAPI schema with {paths} paths saved to {output_file}")


if __name__ == "__main__":
    generate_openapi(sys.argv[1] if len(sys.argv) > 1 else "openapi.json")
