"""示例模板资源"""
