from setuptools import setup, find_packages

# 步骤1：扫描 flatfsm 下所有子包（得到 ["flatfsm", "flatfsm.core", "flatfsm.utils", ...]）
flatfsm_packages = find_packages(include=["flatfsm", "flatfsm.*"])

setup(
    name="flatfsm",
    version="0.1.0",
    description="A simple non-hierarchical finite state machine based on events",
    # 步骤2：打包列表 = 主包 "flatfsm" + 全部子包
    packages=flatfsm_packages,
    python_requires=">=3.10",
    install_requires=[
        "loguru>=0.7.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    # 打包资源文件
    package_data={
        "": ["*.md"],
    },
)
