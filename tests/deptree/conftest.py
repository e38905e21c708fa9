"""Shared manifest fixtures for deptree tests."""

import pytest

PACKAGES_CONFIG = """<?xml version="1.0" encoding="utf-8"?>
<packages>
  <package id="Microsoft.AspNet.Mvc" version="5.2.3" targetFramework="net45" />
  <package id="Newtonsoft.Json" version="6.0.4" targetFramework="net45" />
  <package id="StyleCop.Analyzers" version="1.0.2" targetFramework="net45" developmentDependency="true" />
</packages>
"""

SDK_PROJECT = """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <OutputType>Exe</OutputType>
    <TargetFrameworks>netcoreapp2.0;net461</TargetFrameworks>
  </PropertyGroup>
  <PropertyGroup>
    <AssemblyName>Simple.App</AssemblyName>
    <PackageId>Simple.Package</PackageId>
  </PropertyGroup>
  <ItemGroup>
    <PackageReference Include="Microsoft.Extensions.Logging" Version="2.0.0" />
    <PackageReference Include="Serilog">
      <Version>2.6.0</Version>
    </PackageReference>
    <PackageReference Include="Microsoft.CodeAnalysis.FxCopAnalyzers" Version="2.6.1" developmentDependency="true" />
  </ItemGroup>
</Project>
"""

LEGACY_PROJECT = """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="15.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup>
    <Configuration Condition=" '$(Configuration)' == '' ">Debug</Configuration>
    <AssemblyName>Legacy.Web</AssemblyName>
    <TargetFrameworkVersion>v4.5.2</TargetFrameworkVersion>
  </PropertyGroup>
  <ItemGroup>
    <Reference Include="System" />
    <Reference Include="Newtonsoft.Json, Version=9.0.1, Culture=neutral, PublicKeyToken=30ad4fe6b2a6aeed, processorArchitecture=MSIL">
      <HintPath>..\\packages\\Newtonsoft.Json.9.0.1\\lib\\net45\\Newtonsoft.Json.dll</HintPath>
    </Reference>
  </ItemGroup>
</Project>
"""

PROJECT_JSON = """{
  "version": "1.0.0-*",
  "dependencies": {
    "Microsoft.NETCore.App": {"version": "1.0.0", "type": "platform"},
    "Newtonsoft.Json": "9.0.1",
    "Microsoft.Net.Compilers": {"version": "1.3.2", "type": "build"},
    "Local.Lib": {"target": "project"}
  },
  "frameworks": {"netcoreapp1.0": {}}
}
"""


@pytest.fixture
def packages_config():
    return PACKAGES_CONFIG


@pytest.fixture
def sdk_project():
    return SDK_PROJECT


@pytest.fixture
def legacy_project():
    return LEGACY_PROJECT


@pytest.fixture
def project_json():
    return PROJECT_JSON
