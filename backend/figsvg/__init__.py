"""
figsvg - 设计树 → SVG 资源提取与打包

模块结构：
- config/     运行期配置加载
- models/     数据模型定义
- loaders/    输入JSON解析（节点树/元素列表）
- render/     可渲染判定/矩形构建/样式应用/SVG序列化
- pipeline/   流水线编排与打包
- cli         命令行入口
"""

__version__ = "0.1.0"
