"""
Pagewright — visual page builder core.

  kernel   document model, tree edits, drop resolution, undo/redo
  codegen  style resolution and source generation for React and Flutter
"""
