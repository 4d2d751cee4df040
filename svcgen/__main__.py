# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Main entry point for running svcgen as a module: python -m svcgen"""

from .cli import main

if __name__ == '__main__':
    main()
