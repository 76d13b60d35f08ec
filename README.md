# honyakusha

Translate text from the command line through several translation services at
once: Google Translate, Bing Translator, DeepL and LibreTranslate. The
selected services are asked concurrently and their answers are shown one
after another, in a fixed order (Bing, Google, DeepL, LibreTranslate).

## Installation

```
pip install honyakusha
```

## Usage

Translate some text; the target language comes from the configuration, or
else from the locale environment (`LANGUAGE`, `LC_ALL`, `LC_MESSAGES`,
`LANG`):

```
honyakusha trans "Quickly translate words and phrases."
```

Choose the source and target languages, the services and the output format:

```
honyakusha trans --source en --target zh-CN --translator google --translator bing "Hello, world"
honyakusha trans --target ja -f json --translator google,deepl-api "Hello, world"
```

Options of `trans`:

- `--source` language of the text; when empty, the configured source is used,
  and when that is empty too the service detects it
- `--target` language to translate into; when empty it comes from the
  configuration, then from the locale environment
- `--translator` use the named services (`google`, `bing`, `deepl-api`,
  `libretranslate-api`); may be repeated or comma separated. Named services
  are used whether or not they are enabled in the configuration
- `-f`, `--format` output formatter: `plain` (default) or `json`; any other
  name prints ``Unsupported formatter `NAME'``

All words after `trans` are joined with spaces into the text to translate. If
there is no text, `missing args: requires TEXT` is printed and the exit
status is 1.

The `plain` format prints the original text under `Raw:` and each service's
translation, or its error message, under the service's name, indented by four
spaces. The `json` format prints an object with `code`, `error`, `text` and a
`translators` list, each entry holding `translator` (`code`, `name`), `code`,
`error` and `translatedText`. A service that fails has `code` 1 and an
`error` such as `ApiError: 400 Bad Request` or `HTTPError: ...`.

Show version information:

```
honyakusha version
```

Run `honyakusha` with no command to see the help text.

Set `DEBUG` to any non-empty value in the environment to print every HTTP
request and response to standard error.

## Configuration

Settings are read from `honyakusha.toml` in the working directory, or else
from `honyakusha.toml` in the user configuration directory (as found by
`platformdirs`). Without either file, the defaults are used: no service is
enabled and no languages are set.

```toml
[translate]
source = ""
target = "zh-CN"

[translators.google]
enabled = true

[translators.bing]
enabled = true
proxy = ""

[translators.deepl-api]
enabled = false
api-key = "placeholder"

[translators.libretranslate-api]
enabled = false
uri = ""
api-key = "placeholder"
```

Each translator accepts `enabled`, `proxy`, `uri` (a base address that
replaces the service's default host) and `api-key`. Unknown keys are ignored;
a value of the wrong type, or a file that is not valid TOML, stops the
command with an error message and exit status 1.

## Library use

```python
from honyakusha.conf import load
from honyakusha.trans import translate, format_result

res = translate("Hello, world", "en", "ja", ["google"], load())
print(format_result(res, "plain"), end="")
```

Useful modules:

- `honyakusha.conf` — `Conf`, `parse_conf`, `load`, `load_from_file`,
  `file_path`, `ConfError`
- `honyakusha.trans` — `translate`, `available_translators`, `Translator`,
  `format_result`
- `honyakusha.res` — `Res` and `TranslatorResult`, each with `to_dict()`
- `honyakusha.formatters` — `format_plain`, `format_json`
- `honyakusha.lang` — `query`, `auto_detect`, `Lang`
- `honyakusha.translators.google`, `.bing`, `.deepl`, `.libretranslate` —
  one `translate_text(text, source, target, conf)` per service

## What it does not do

There is no command to create a sample configuration file; write
`honyakusha.toml` by hand. There is no HTML output format, only `plain` and
`json`.