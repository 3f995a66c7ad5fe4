from __future__ import annotations

import pytest

SAMPLE_README = """\
# Awesome MCP Servers

- [Stray link](https://example.com/stray) - listed before any category, ignored

## Server Implementations

### 🗄️ <a name="databases"></a>Databases

- [crystaldba/postgres-mcp](https://github.com/crystaldba/postgres-mcp) - 🐍 🏠 PostgreSQL database integration with schema inspection
- [cloud/warehouse](https://github.com/cloud/warehouse) - 📇 ☁️ Query a hosted data warehouse 🍎 🪟 🐧
- [broken line without separator](https://github.com/broken/line)
- not a link - plain list item

### 📂 <a name="file-systems"></a>File Systems

- [modelcontextprotocol/filesystem](https://github.com/modelcontextprotocol/servers) - 📇 🏠 🎖️ Direct local file system access
- [dotnet/files](https://github.com/dotnet/files) - #️⃣ 🏠 🪟 File tools written in C# for Windows

## Frameworks

- [framework/server-kit](https://github.com/framework/server-kit) - 🐍 A framework, not a server
"""


@pytest.fixture
def sample_readme() -> str:
    return SAMPLE_README
