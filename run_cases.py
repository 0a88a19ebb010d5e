"""
Run the polynomial YAML test-cases
"""

import os
from pathlib import Path

from rootfind.cases import run_cases, summary


def yaml_testcases():
    """ Run all YAML cases in the cases directory, `data/` unless `ROOTFIND_CASES` says otherwise """
    path = Path(os.environ.get('ROOTFIND_CASES', 'data/'))
    results = run_cases(path)

    for r in results:
        if r['error']:
            print(f"{r['desc']}: {r['error']}")
        elif not r['ok']:
            print(f"Unexpected result for {r['desc']}: {r['root']}")

    print(summary(results, cols=['iters', 'converged', 'matched', 'ok']))
    failed = [r for r in results if not r['ok']]
    if failed:
        raise SystemExit(f'{len(failed)} of {len(results)} cases failed')


if __name__ == '__main__':
    yaml_testcases()
