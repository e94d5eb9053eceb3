# init to allow relative imports in tests
