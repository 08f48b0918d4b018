"""Immutable tree transform — drop comments and rename <b> to <strong>."""

import dataclasses

from ramita import Comment, Element, parse, render, transform


def rewrite(node) -> object:
    """Remove comments, rename bold tags."""
    if isinstance(node, Comment):
        return None
    if isinstance(node, Element) and node.tag == "b":
        return dataclasses.replace(node, tag="strong")
    return node


source = """<div id="main">
<!-- header goes here -->
<p>Some <b>bold</b> text.</p>
<p>More <b>bold</b><br/>text.</p>
</div>
"""

tree = parse(source)
new_tree = transform(tree, rewrite)

print("Original:")
print(render(tree))
print()
print("After transform:")
print(render(new_tree))
