"""Parse and render HTML in 3 lines — zero config, zero deps."""

from ramita import parse, render

tree = parse('<p class="greeting">Hello <b>World</b></p>')
print(tree)
print(render(tree))
