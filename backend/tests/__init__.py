"""
chainkit Test Suite

Test structure:
- unit/: Test components in isolation
- integration/: Test full pipelines end to end
"""
