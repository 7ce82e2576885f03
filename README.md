# bakerysplit

Split a UI Bakery application export into a folder tree with one directory
per top-level page. The export is a single JSON file, and the split form is
easier to review and diff.

Every page, slot, component and workflow is traced back to the top-level page
it belongs to:

- a page belongs to the outermost page in its `parentPageId` chain;
- a slot belongs to its parent page, or to the page of its parent component;
- a component belongs to the page of its parent slot;
- a workflow belongs to its parent page, or else to its `parentId`.

Elements that cannot be placed on any page are grouped under the empty id.

## Installation

```
pip install .
```

## Command line

```
bakerysplit -file=export.json
```

`--file` is accepted as well. Only the file name part of the argument is used,
and the file is read from the current working directory. The output goes into a
directory named after that file without its extension (`export/` in the
example), also relative to the working directory.

For each group that has a page with a `url`, the tool writes into
`export/pages/<url>/`. The url is taken from the first page in the group that
has one.

- `<url>.json`: the page and its sub-pages
- `components.json`: components placed on the page
- `slots.json`: slots placed on the page
- `workflows.json`: workflows placed on the page

A group with no url is written straight into `export/`. Its pages go to
`.json`, and its components, slots and workflows go to the file names listed
above.

A file is written only when its list is not empty. The JSON is indented by two
spaces and its keys are sorted. The characters `<`, `>` and `&` are written as
`\u` escapes.

Every other top-level list in the export is written as `export/<name>.json`.
That is every list other than `rootPageList`, `componentList`, `slotList` and
`workflowList`. Failures to create a folder, or to write one of these other
lists, are ignored.

The tool writes nothing if two groups would go to the same folder. That happens
when they share a `url`, or when both have none.

Problems are reported on standard output with one of these prefixes:

- `Reading error:`
- `Json error:`
- `Processing error:`

The command always exits with status 0.

## Library use

```python
import json
from bakerysplit.pages import to_pages
from bakerysplit.writer import write_to_fs

with open("export.json", encoding="utf-8") as fh:
    export = json.load(fh)

fragments = to_pages(export)   # {top_page_id: {"rootPageList": [...], ...}}
write_to_fs("export", fragments, export)
```

Other functions you can call:

- `bakerysplit.writer.write_fragments(root, fragments, export, mkdir_all, write_file)`
  does the same work as `write_to_fs`. Folders are created through
  `mkdir_all(path)` and files are written through `write_file(path, data)`.
- `url_for_fragment` returns the url a group is written under.
- `check_distinct` checks that no two groups share a folder.
- `write_other` writes the other top-level lists.
- `bakerysplit.navigation.UIBakery` indexes an export by id.
- Its `page_of_page`, `page_of_slot`, `page_of_component` and
  `page_of_workflow` methods resolve the top-level page of a single element.

Errors raise exceptions derived from `bakerysplit.navigation.ExportError`:

- `NotANodeError`: an element is not a JSON object, or a parent it refers to
  does not exist.
- `MissingPropertyError`: a required `id` is missing.
- `bakerysplit.writer.DuplicatedUrlError`: two groups would go to the same
  folder.

## Running the tests

```
pip install .[test]
pytest
```