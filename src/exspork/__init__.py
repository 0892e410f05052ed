# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""exspork: README generation from TypeScript declaration files of WebAssembly packages."""
