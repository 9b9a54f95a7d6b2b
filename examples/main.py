#!/usr/bin/env python3
"""
Example script demonstrating basic usage of the docshape library.

Run from the project root after installing the package:
    python examples/main.py data/export.json
"""

from docshape import analyze
from docshape.report import print_report, to_dataframe
from docshape.sources import iter_json_files
import sys

def main():
    file_path = "data/export.json"
    if len(sys.argv) > 1:
        file_path = sys.argv[1]
        
    print(f"Loading {file_path}...")
    documents = list(iter_json_files(file_path))
    
    # Profile and print every field path
    print("Profiling field types...")
    tree = analyze(documents, on_malformed="skip", progress=True)
    print_report(tree, documents=len(documents))

    # Only the drifting fields, as a DataFrame
    df = to_dataframe(tree, only_drift=True)
    print(f"{len(df)} of {tree.size()} fields show schema drift.")
    if not df.empty:
        print(df.head())


if __name__ == '__main__':
    main()
