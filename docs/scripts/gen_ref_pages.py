#!/usr/bin/env python3
"""Generate API reference documentation for klaw-option."""

import ast
from pathlib import Path

import mkdocs_gen_files

nav = mkdocs_gen_files.Nav()
root = Path(__file__).parent.parent.parent
package_name = 'klaw_option'
src = root / 'src' / package_name


def get_module_description(module_path: Path, fallback: str) -> str:
    """Extract the first line of a module docstring."""
    try:
        tree = ast.parse(module_path.read_text(encoding='utf-8'))
    except (OSError, SyntaxError):
        return fallback
    docstring = ast.get_docstring(tree)
    if not docstring:
        return fallback
    return ' '.join(docstring.splitlines()[0].split())


def is_public(path: Path) -> bool:
    """Skip private modules (any path component starting with a single _)."""
    rel_parts = path.relative_to(src).parts
    return not any(part.startswith('_') and not part.startswith('__') for part in rel_parts)


# Collect top-level submodules for the index table
submodules: list[tuple[str, str, bool]] = []
for item in sorted(src.iterdir()):
    if item.name.startswith('_') or item.name == 'py.typed':
        continue
    if item.is_file() and item.suffix == '.py':
        submodules.append((item.stem, get_module_description(item, f'Module {item.stem}'), False))
    elif item.is_dir() and (item / '__init__.py').exists():
        description = get_module_description(item / '__init__.py', f'Package {item.name}')
        submodules.append((item.name, description, True))

with mkdocs_gen_files.open(Path('reference', 'index.md'), 'w') as index:
    index.write(f'# {package_name}\n\n')
    index.write(f'::: {package_name}\n')
    index.write('    options:\n')
    index.write('      show_submodules: false\n\n')
    index.write('| Module | Description |\n')
    index.write('|--------|-------------|\n')
    for name, description, is_package in submodules:
        target = f'{name}/index.md' if is_package else f'{name}.md'
        index.write(f'| [{name}]({target}) | {description} |\n')
    index.write('\n')

nav['reference'] = 'index.md'

for path in sorted(src.rglob('*.py')):
    if not is_public(path):
        continue

    module_path = path.relative_to(src).with_suffix('')
    doc_path = path.relative_to(src).with_suffix('.md')
    parts = tuple(module_path.parts)

    if parts[-1] == '__init__':
        parts = parts[:-1]
        doc_path = doc_path.with_name('index.md')

    if not parts:
        continue

    full_doc_path = Path('reference', doc_path)
    nav[('reference', *parts)] = doc_path.as_posix()

    with mkdocs_gen_files.open(full_doc_path, 'w') as fd:
        ident = '.'.join((package_name, *parts))
        fd.write(f'# `{ident}`\n\n')
        fd.write(f'::: {ident}\n')
        fd.write('    options:\n')
        fd.write('      members: true\n')
        fd.write('      show_source: true\n\n')

    mkdocs_gen_files.set_edit_path(full_doc_path, path.relative_to(root))

with mkdocs_gen_files.open('reference/SUMMARY.md', 'w') as nav_file:
    nav_file.writelines(nav.build_literate_nav())
