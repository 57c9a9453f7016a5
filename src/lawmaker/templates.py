"""Template bodies for the files of a generated Mix project.

Placeholders use ``{{ name }}`` and conditional sections use
``{% if flag %} ... {% endif %}``; see :mod:`lawmaker.template`.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TemplateId(str, Enum):
    """Closed set of templates the planner can reference."""

    README = "readme"
    GITIGNORE = "gitignore"
    CREDO = "credo"
    COVEREX_IGNORE = "coverex_ignore"
    DIALYZER_IGNORE = "dialyzer_ignore"
    MIXFILE = "mixfile"
    MIXFILE_UMBRELLA = "mixfile_umbrella"
    MIXFILE_APPS = "mixfile_apps"
    CONFIG = "config"
    CONFIG_UMBRELLA = "config_umbrella"
    LIB = "lib"
    LIB_APP = "lib_app"
    TEST = "test"
    TEST_HELPER = "test_helper"


README = """# {{ mod }}

**TODO: Add description**
{% if has_app %}

## Installation

If [available in Hex](https://hex.pm/docs/publish), the package can be installed
by adding `{{ app }}` to your list of dependencies in `mix.exs`:

```elixir
def deps do
  [
    {:{{ app }}, "~> 0.1.0"}
  ]
end
```

Documentation can be generated with [ExDoc](https://github.com/elixir-lang/ex_doc)
and published on [HexDocs](https://hexdocs.pm). Once published, the docs can
be found at [https://hexdocs.pm/{{ app }}](https://hexdocs.pm/{{ app }}).
{% endif %}
"""

GITIGNORE = """# The directory Mix will write compiled artifacts to.
/_build/

# If you run "mix test --cover", coverage assets end up here.
/cover/

# The directory Mix downloads your dependencies sources to.
/deps/

# Where 3rd-party dependencies like ExDoc output generated docs.
/doc/

# Ignore .fetch files in case you like to edit your project deps locally.
/.fetch

# If the VM crashes, it generates a dump, let's ignore it too.
erl_crash.dump

# Also ignore archive artifacts (built via "mix archive.build").
*.ez
"""

DIALYZER_IGNORE = """Any line of dialyzer output copied into this file is ignored by the dialyzer type checks.
Do not abuse this file, type checks are important.
Use it only for warnings coming from third-party or generated code.
"""

COVEREX_IGNORE = """[
  #
  # Modules listed here are ignored by the coverex tool.
  # Do not abuse this file, test coverage is important.
  # Use it only for third-party or generated code.
  #
  # Examples:
  #
  # {{ mod }}.Foo,
  # {{ mod }}.Foo.Bar,
  #
]
"""

CREDO = """%{
  configs: [
    %{
      name: "default",
      files: %{
        included: ["lib/", "src/", "web/", "apps/"],
        excluded: [~r"/_build/", ~r"/deps/"]
      },
      requires: [],
      check_for_updates: true,
      strict: true,
      color: true,
      checks: [
        {Credo.Check.Consistency.ExceptionNames},
        {Credo.Check.Consistency.LineEndings},
        {Credo.Check.Consistency.ParameterPatternMatching},
        {Credo.Check.Consistency.SpaceAroundOperators},
        {Credo.Check.Consistency.SpaceInParentheses},
        {Credo.Check.Consistency.TabsOrSpaces},

        {Credo.Check.Design.AliasUsage, priority: :low, exit_status: 0},
        {Credo.Check.Design.DuplicatedCode, excluded_macros: []},
        {Credo.Check.Design.TagTODO, priority: :low, exit_status: 0},
        {Credo.Check.Design.TagFIXME, priority: :low, exit_status: 0},

        {Credo.Check.Readability.FunctionNames},
        {Credo.Check.Readability.LargeNumbers},
        {Credo.Check.Readability.MaxLineLength, priority: :normal, max_length: 120, exit_status: 0},
        {Credo.Check.Readability.ModuleAttributeNames},
        {Credo.Check.Readability.ModuleDoc, false},
        {Credo.Check.Readability.ModuleNames, priority: :high},
        {Credo.Check.Readability.ParenthesesOnZeroArityDefs, priority: :high},
        {Credo.Check.Readability.PredicateFunctionNames, priority: :high},
        {Credo.Check.Readability.RedundantBlankLines, priority: :low},
        {Credo.Check.Readability.TrailingBlankLine},
        {Credo.Check.Readability.TrailingWhiteSpace},
        {Credo.Check.Readability.VariableNames},
        {Credo.Check.Readability.Semicolons},

        {Credo.Check.Refactor.DoubleBooleanNegation, priority: :high},
        {Credo.Check.Refactor.CondStatements},
        {Credo.Check.Refactor.CyclomaticComplexity, priority: :high, exit_status: 2, max_complexity: 12},
        {Credo.Check.Refactor.FunctionArity},
        {Credo.Check.Refactor.MatchInCondition},
        {Credo.Check.Refactor.NegatedConditionsInUnless, priority: :high, exit_status: 2},
        {Credo.Check.Refactor.Nesting, max_nesting: 3, priority: :high, exit_status: 2},
        {Credo.Check.Refactor.UnlessWithElse, priority: :higher, exit_status: 2},

        {Credo.Check.Warning.BoolOperationOnSameValues, priority: :high, exit_status: 2},
        {Credo.Check.Warning.IExPry, priority: :higher, exit_status: 2},
        {Credo.Check.Warning.IoInspect, priority: :higher, exit_status: 2},
        {Credo.Check.Warning.OperationOnSameValues, priority: :higher, exit_status: 2},
        {Credo.Check.Warning.UnusedEnumOperation, priority: :higher, exit_status: 2},
        {Credo.Check.Warning.UnusedStringOperation, priority: :higher, exit_status: 2},
        {Credo.Check.Warning.RaiseInsideRescue, priority: :higher, exit_status: 2}
      ]
    }
  ]
}
"""

MIXFILE = """defmodule {{ mod }}.Mixfile do
  use Mix.Project

  def project do
    {coverex_ignore_modules, []} = Code.eval_file(".coverex_ignore.exs")
    true = is_list(coverex_ignore_modules)
    [
      app: :{{ app }},
      version: "0.1.0",
      elixir: "~> {{ version }}",
      build_embedded: false,
      consolidate_protocols: true,
      start_permanent: Mix.env == :prod,
      test_coverage: [
        tool: Coverex.Task,
        output: "./cover",
        coveralls: true,
        ignore_modules: coverex_ignore_modules
      ],
      dialyzer: [ignore_warnings: ".dialyzer_ignore"],
      elixirc_paths: elixirc_paths(Mix.env),
      deps: deps()
    ]
  end

  # Run "mix help compile.app" to learn about applications.
  def application do
    [
      extra_applications: [:logger]{{ sup_app }}
    ]
  end

  # Run "mix help deps" to learn about dependencies.
  defp deps do
    [
      {:credo, "~> 0.8", only: [:dev, :test], runtime: false},
      {:coverex, "1.4.13", only: [:dev, :test], runtime: false},
      {:dialyxir, "~> 0.5", only: [:dev, :test], runtime: false},
    ]
  end

  # Specifies which paths to compile per environment.
  defp elixirc_paths(:test), do: ["test/support"] ++ elixirc_paths()
  defp elixirc_paths(_), do: elixirc_paths()
  defp elixirc_paths, do: ["lib"]
end
"""

MIXFILE_APPS = """defmodule {{ mod }}.Mixfile do
  use Mix.Project

  def project do
    {coverex_ignore_modules, []} = Code.eval_file("../../.coverex_ignore.exs")
    true = is_list(coverex_ignore_modules)
    [
      app: :{{ app }},
      version: "0.1.0",
      build_path: "../../_build",
      config_path: "../../config/config.exs",
      deps_path: "../../deps",
      lockfile: "../../mix.lock",
      elixir: "~> {{ version }}",
      build_embedded: false,
      consolidate_protocols: true,
      start_permanent: Mix.env == :prod,
      test_coverage: [
        tool: Coverex.Task,
        output: "../../cover",
        coveralls: true,
        ignore_modules: coverex_ignore_modules
      ],
      elixirc_paths: elixirc_paths(Mix.env),
      deps: deps()
    ]
  end

  # Run "mix help compile.app" to learn about applications.
  def application do
    [
      extra_applications: [:logger]{{ sup_app }}
    ]
  end

  # Run "mix help deps" to learn about dependencies.
  defp deps do
    [
      # {:sibling_app_in_umbrella, in_umbrella: true},
    ]
  end

  # Specifies which paths to compile per environment.
  defp elixirc_paths(:test), do: ["test/support"] ++ elixirc_paths()
  defp elixirc_paths(_), do: elixirc_paths()
  defp elixirc_paths, do: ["lib"]
end
"""

MIXFILE_UMBRELLA = """defmodule {{ mod }}.Mixfile do
  use Mix.Project

  def project do
    [
      apps_path: "apps",
      build_embedded: false,
      consolidate_protocols: true,
      start_permanent: Mix.env == :prod,
      deps: deps(),
      dialyzer: [ignore_warnings: ".dialyzer_ignore"],
    ]
  end

  # Dependencies listed here are available only for this
  # project and cannot be accessed from applications inside
  # the apps folder.
  defp deps do
    [
      {:credo, "~> 0.8", only: [:dev, :test], runtime: false},
      {:coverex, "1.4.13", only: [:dev, :test], runtime: false},
      {:dialyxir, "~> 0.5", only: [:dev, :test], runtime: false},
    ]
  end
end
"""

CONFIG = """# This file is responsible for configuring your application
# and its dependencies with the aid of the Mix.Config module.
use Mix.Config

# This configuration is loaded before any dependency and is restricted
# to this project. You can configure your application as:
#
#     config :{{ app }}, key: :value
#
# and access this configuration in your application as:
#
#     Application.get_env(:{{ app }}, :key)
#
# Configuration per environment can be emulated by importing
# files relative to this directory:
#
#     import_config "#{Mix.env}.exs"
"""

CONFIG_UMBRELLA = """# This file is responsible for configuring your application
# and its dependencies with the aid of the Mix.Config module.
use Mix.Config

# The umbrella project as well as each child application will
# require this configuration file, so they all share the same
# configuration.
import_config "../apps/*/config/config.exs"

# Sample configuration (overrides the imported configuration above):
#
#     config :logger, :console,
#       level: :info,
#       format: "$date $time [$level] $metadata$message\\n",
#       metadata: [:user_id]
"""

LIB = '''defmodule {{ mod }} do
  @moduledoc """
  Documentation for {{ mod }}.
  """

  @doc """
  Hello world.

  ## Examples

      iex> {{ mod }}.hello
      :world

  """
  def hello do
    :world
  end
end
'''

LIB_APP = """defmodule {{ mod }}.Application do
  # See https://hexdocs.pm/elixir/Application.html
  # for more information on OTP Applications
  @moduledoc false

  use Application

  def start(_type, _args) do
    # List all child processes to be supervised
    children = [
      # Starts a worker by calling: {{ mod }}.Worker.start_link(arg)
      # {{{ mod }}.Worker, arg},
    ]

    # See https://hexdocs.pm/elixir/Supervisor.html
    # for other strategies and supported options
    opts = [strategy: :one_for_one, name: {{ mod }}.Supervisor]
    Supervisor.start_link(children, opts)
  end
end
"""

TEST = """defmodule {{ mod }}Test do
  use ExUnit.Case
  doctest {{ mod }}

  test "greets the world" do
    assert {{ mod }}.hello() == :world
  end
end
"""

TEST_HELPER = """ExUnit.start()
"""


TEMPLATES: Mapping[TemplateId, str] = MappingProxyType(
    {
        TemplateId.README: README,
        TemplateId.GITIGNORE: GITIGNORE,
        TemplateId.CREDO: CREDO,
        TemplateId.COVEREX_IGNORE: COVEREX_IGNORE,
        TemplateId.DIALYZER_IGNORE: DIALYZER_IGNORE,
        TemplateId.MIXFILE: MIXFILE,
        TemplateId.MIXFILE_UMBRELLA: MIXFILE_UMBRELLA,
        TemplateId.MIXFILE_APPS: MIXFILE_APPS,
        TemplateId.CONFIG: CONFIG,
        TemplateId.CONFIG_UMBRELLA: CONFIG_UMBRELLA,
        TemplateId.LIB: LIB,
        TemplateId.LIB_APP: LIB_APP,
        TemplateId.TEST: TEST,
        TemplateId.TEST_HELPER: TEST_HELPER,
    }
)

__all__ = ["TEMPLATES", "TemplateId"]
