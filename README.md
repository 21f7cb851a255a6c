# magebox

Building blocks for a local Magento development environment:

- **Project configuration** (`magebox.config_types`, `magebox.config_loader`):
  read `.magebox.yaml` (or the older `.magebox`) and merge a
  `.magebox.local.yaml` / `.magebox.local` override into it.
- **Global configuration** (`magebox.global_config`): user-wide defaults kept
  in `~/.magebox/config.yaml`.
- **Bootstrap helpers** (`magebox.bootstrap`): progress tracking, the lists of
  supported OS versions, PHP versions and required PHP extensions, and the
  shell and sudo wrappers that platform installers build on.
- **Profiler records** (`magebox.blackfire`): Blackfire credentials and status.
- **Console output** (`magebox.colors`): coloured status lines, headers, boxes
  and logos.
- **Log tailing** (`magebox.logs`): show the last lines of Magento log files
  and follow them as they grow, with the log level coloured.

The package needs Python 3.10 or newer and depends on PyYAML.

## Project configuration

A project configuration file looks like this:

```yaml
name: mystore
domains:
  - host: mystore.test
    root: pub
    ssl: true
php: "8.2"
services:
  mysql: "8.0"
  redis: true
  opensearch:
    version: "2.12"
    memory: "1g"
env:
  MAGE_MODE: developer
commands:
  reindex: "php bin/magento indexer:reindex"
  deploy:
    description: "Deploy to production mode"
    run: "php bin/magento deploy:mode:set production"
```

A service can be written as a version string, as `true` or `false`, or as a
mapping with `version`, `port` and `memory` (a mapping always enables it). A
command can be written as a plain string or as a mapping with `description`
and `run`. The known services are `mysql`, `mariadb`, `redis`, `opensearch`,
`elasticsearch`, `rabbitmq`, `mailpit` and `varnish`.

```python
from magebox.config_loader import ConfigNotFoundError, load_from_path, save_to_path

try:
    config = load_from_path("/path/to/project")
except ConfigNotFoundError as exc:
    print(exc)
else:
    print(config.name, config.php)
    for domain in config.domains:
        print(domain.host, domain.get_root(), domain.is_ssl_enabled(), domain.get_store_code())
    if config.services.has_mysql():
        print("MySQL", config.services.get_database_service().version)
    save_to_path(config, "/path/to/project")
```

`Domain.get_root()` defaults to `pub`, `is_ssl_enabled()` to `True` and
`get_store_code()` to `default`. `Services.get_database_service()` prefers
MySQL over MariaDB; `get_search_service()` prefers OpenSearch over
Elasticsearch.

In the merged result, the local override file replaces `name`, `php`,
`domains` and each service that it sets. Its `env` and `commands` entries are
added on top of the main file's. `Config.validate()`, run by the loader,
raises `ValidationError` when the name, the domains, a domain host or the PHP
version is missing. A file that is not valid YAML, or has the wrong shape,
raises `ParseError`. `save_to_path()` always writes `.magebox.yaml`.

`parse_config()` and `config_to_dict()` in `magebox.config_types` convert
between parsed YAML data and `Config` objects without touching files.

## Global configuration

```python
from pathlib import Path
from magebox.global_config import load_global_config, save_global_config

home = str(Path.home())
config = load_global_config(home)
print(config.get_tld(), config.use_dnsmasq())
config.default_php = "8.3"
save_global_config(home, config)
```

If no file exists, the defaults are used: DNS via the hosts file, PHP 8.2,
the `test` TLD, MySQL 8.0 and Redis. When a file is loaded, an unset DNS mode,
default PHP or TLD is filled in from these defaults. `init_global_config()`
writes the defaults unless a file is already there.

`get_blackfire_credentials()` and `get_tideways_credentials()` let
`BLACKFIRE_SERVER_ID`, `BLACKFIRE_SERVER_TOKEN`, `BLACKFIRE_CLIENT_ID`,
`BLACKFIRE_CLIENT_TOKEN` and `TIDEWAYS_API_KEY` take precedence over the
values in the file. The `has_*_credentials()` checks look at the file's values
only.

## Bootstrap helpers

```python
from magebox.bootstrap import BaseInstaller, new_progress

progress = new_progress(10)
installer = BaseInstaller()
try:
    installer.run_command("brew install nginx")
    progress.add_result("nginx", True, None, "installed")
except Exception as exc:
    progress.add_result("nginx", False, exc, "")
print(progress.has_errors(), progress.errors)
```

The `run_*` methods raise `subprocess.CalledProcessError` when the command
fails; the silent variants discard its input and output. `write_file()` writes
a temporary file and copies it into place with `sudo cp`.

## Console output

```python
from magebox import colors

print(colors.success("done"))
print(colors.header("Services"))
colors.print_warning("PHP %s is not installed", "8.4")
colors.disable_colors()
print(colors.error("failed"))  # "[ERROR] failed"
```

Colours start switched off when `NO_COLOR` is set, when standard output is not
a terminal, or on Windows when neither `TERM` nor `WT_SESSION` is set.
`enable_colors()` and `disable_colors()` change this at run time.

## Tailing logs

```python
from magebox.logs import LogTailer, tail_logs

# Print the last 20 lines of every *.log file, then keep following them.
tail_logs("/path/to/project/var/log", "*.log", True, 20)

with LogTailer("/path/to/project/var/log", "system.log", False, 50) as tailer:
    tailer.start()
```

Matching files are searched for in the directory and its subdirectories; an
empty pattern means `*.log`. `start()` raises `FileNotFoundError` when no file
matches. In follow mode it polls every tenth of a second, prints complete new
lines, starts again from the beginning when a file has been truncated, and
picks up new matching files that appear directly in the directory. It blocks
until `stop()` is called; `tail_logs()` also ends on Ctrl+C.

## What it does not do

The package is a library. It has no command-line program, and it does not
itself install packages, manage Docker containers, Nginx, Varnish, PHP-FPM,
Xdebug or Blackfire, or set up DNS; it provides the configuration, progress
records and helpers such tools are built from.