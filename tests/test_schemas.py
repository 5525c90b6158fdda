import json

from dep_update_detector.models import DependencyUpdateToolData, File, FileType, Tool
from dep_update_detector.schemas import DependencyUpdateToolResponse


def test_response_document_shape():
    data = DependencyUpdateToolData(
        tools=[
            Tool(
                name="PyUp",
                url="https://pyup.io/",
                desc="Automated dependency updates for Python.",
                files=(File(path=".pyup.yml", type=FileType.source),),
            ),
            Tool(name="Dependabot", url="https://github.com/dependabot", files=(File(),)),
        ]
    )

    document = json.loads(DependencyUpdateToolResponse.from_data("acme/demo", data).model_dump_json())

    assert document["repository"] == "acme/demo"
    assert document["tools"][0] == {
        "name": "PyUp",
        "url": "https://pyup.io/",
        "desc": "Automated dependency updates for Python.",
        "files": [{"path": ".pyup.yml", "type": "source", "offset": 0}],
    }
    assert document["tools"][1]["files"] == [{"path": "", "type": "", "offset": 0}]


def test_empty_result():
    response = DependencyUpdateToolResponse.from_data("x", DependencyUpdateToolData())
    assert response.tools == []
