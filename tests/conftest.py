"""Shared fixtures: small frmf2xml documents in both export shapes."""

import pytest

from fmb_parser import parse_fmb_xml

# Bare shape: plain attributes, blocks directly under <Module>
MINIMAL_FMB_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Module Name="TESTFORM" Title="Test Form">
  <Block Name="B1" QueryDataSourceName="ORDERS">
    <Item Name="ORDER_NO" ItemType="Text Item" Prompt="Order No" CanvasName="CANVAS_BODY"
          Required="true" MaximumLength="20"/>
    <Item Name="ACTIVE_FLAG" ItemType="Check Box" Prompt="Active" CanvasName="CANVAS_BODY"/>
  </Block>
  <Block Name="B2" QueryDataSourceName="ORDER_LINES">
    <Item Name="LINE_AMT" ItemType="Text Item" Prompt="Amount" CanvasName="CANVAS_TAB"
          TabPageName="PAGE_LINES"/>
    <Trigger Name="PRE-INSERT" TriggerText=":b.slip_no := sf_ars_0012('TP', :b.slip_date);"/>
  </Block>
  <Canvas Name="CANVAS_BODY" CanvasType="Content"/>
  <Canvas Name="CANVAS_TAB" CanvasType="Tab">
    <TabPage Name="PAGE_LINES" Label="Lines"/>
  </Canvas>
</Module>
"""

# Same content as written by frmf2xml: FormModule wrapper, layered prefixes
# all bound to one namespace URI
LAYERED_FMB_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Module xmlns="http://xmlns.oracle.com/Forms"
        xmlns:TESTFORM_default="http://xmlns.oracle.com/Forms"
        xmlns:TESTFORM_overridden="http://xmlns.oracle.com/Forms"
        xmlns:FORM_STD_inherited="http://xmlns.oracle.com/Forms"
        version="101020002">
  <FormModule TESTFORM_overridden:Name="TESTFORM" TESTFORM_overridden:Title="Test Form">
    <Block TESTFORM_overridden:Name="B1" TESTFORM_overridden:QueryDataSourceName="ORDERS">
      <Item TESTFORM_overridden:Name="ORDER_NO" TESTFORM_default:ItemType="Text Item"
            FORM_STD_inherited:Prompt="Order:" TESTFORM_overridden:Prompt="Order No"
            TESTFORM_overridden:CanvasName="CANVAS_BODY" TESTFORM_overridden:Required="true"
            TESTFORM_default:MaximumLength="20"/>
      <Item TESTFORM_overridden:Name="ACTIVE_FLAG" FORM_STD_inherited:ItemType="Check Box"
            TESTFORM_default:Prompt="" FORM_STD_inherited:Prompt="Active"
            TESTFORM_overridden:CanvasName="CANVAS_BODY"/>
    </Block>
    <Block TESTFORM_overridden:Name="B2" TESTFORM_overridden:QueryDataSourceName="ORDER_LINES">
      <Item TESTFORM_overridden:Name="LINE_AMT" TESTFORM_default:ItemType="Text Item"
            TESTFORM_overridden:Prompt="Amount" TESTFORM_overridden:CanvasName="CANVAS_TAB"
            TESTFORM_overridden:TabPageName="PAGE_LINES"/>
      <Trigger TESTFORM_overridden:Name="PRE-INSERT"
               TESTFORM_overridden:TriggerText=":b.slip_no := sf_ars_0012(&apos;TP&apos;, :b.slip_date);"/>
    </Block>
    <Canvas TESTFORM_overridden:Name="CANVAS_BODY" TESTFORM_default:CanvasType="Content"/>
    <Canvas TESTFORM_overridden:Name="CANVAS_TAB" TESTFORM_overridden:CanvasType="Tab">
      <TabPage TESTFORM_overridden:Name="PAGE_LINES" TESTFORM_overridden:Label="Lines"/>
    </Canvas>
  </FormModule>
</Module>
"""

# Richer form: LOVs, record groups, form triggers, skipped and summary blocks
FULL_FMB_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Module xmlns:ODGLS144_default="http://xmlns.oracle.com/Forms"
        xmlns:ODGLS144_overridden="http://xmlns.oracle.com/Forms">
  <FormModule ODGLS144_overridden:Name="ODGLS144" ODGLS144_overridden:Title="Voucher Entry">
    <Trigger ODGLS144_overridden:Name="WHEN-NEW-FORM-INSTANCE"
             ODGLS144_overridden:TriggerText="go_block('HEAD');&#10;execute_query;"/>
    <Trigger ODGLS144_overridden:Name="KEY-EXIT" ODGLS144_overridden:TriggerText="do_key('exit_form');"/>
    <Block ODGLS144_overridden:Name="TOOL_BUTTON">
      <Item ODGLS144_overridden:Name="BTN_SAVE" ODGLS144_default:ItemType="Push Button"
            ODGLS144_overridden:Label="Save" ODGLS144_overridden:CanvasName="CANVAS_BODY"/>
    </Block>
    <Block ODGLS144_overridden:Name="HEAD" ODGLS144_overridden:QueryDataSourceName="GLS_VOUCHER">
      <Item ODGLS144_overridden:Name="DEPT_NO" ODGLS144_default:ItemType="Text Item"
            ODGLS144_overridden:Prompt="Department" ODGLS144_overridden:CanvasName="CANVAS_BODY"
            ODGLS144_overridden:LovName="LOV_DEPT" ODGLS144_overridden:MaximumLength="10"/>
      <Item ODGLS144_overridden:Name="DEPT_NAME" ODGLS144_default:ItemType="Display Item"
            ODGLS144_overridden:CanvasName="CANVAS_BODY"/>
      <Item ODGLS144_overridden:Name="CREATE_DATE" ODGLS144_default:ItemType="Text Item"
            ODGLS144_overridden:Prompt="Created" ODGLS144_overridden:CanvasName="CANVAS_BODY"
            ODGLS144_overridden:Enabled="false"/>
      <Item ODGLS144_overridden:Name="HIDDEN_ID" ODGLS144_default:ItemType="Text Item" ODGLS144_overridden:Prompt="Id"
            ODGLS144_overridden:CanvasName="CANVAS_BODY" ODGLS144_overridden:Visible="false"/>
      <Item ODGLS144_overridden:Name="NO_CANVAS" ODGLS144_default:ItemType="Text Item"/>
      <Trigger ODGLS144_overridden:Name="WHEN-VALIDATE-ITEM"
               ODGLS144_overridden:TriggerText="if :head.dept_no is null then&#10;  s_alert(1, 'Department is required');&#10;  raise form_trigger_failure;&#10;end if;"/>
      <Trigger ODGLS144_overridden:Name="PRE-DELETE"
               ODGLS144_overridden:TriggerText="select count(*) into v_count from gls_detail where voucher_no = :head.voucher_no;&#10;if v_count &gt; 0 then raise form_trigger_failure; end if;"/>
    </Block>
    <Block ODGLS144_overridden:Name="DETAIL" ODGLS144_overridden:QueryDataSourceName="GLS_DETAIL">
      <Item ODGLS144_overridden:Name="LINE_AMT" ODGLS144_default:ItemType="Text Item"
            ODGLS144_overridden:Prompt="Amount" ODGLS144_overridden:CanvasName="CANVAS_TAB"
            ODGLS144_overridden:TabPageName="PAGE_DETAIL"/>
      <Item ODGLS144_overridden:Name="POST_FLAG" ODGLS144_default:ItemType="Check Box"
            ODGLS144_overridden:Prompt="Posted" ODGLS144_overridden:CanvasName="CANVAS_TAB"
            ODGLS144_overridden:TabPageName="PAGE_DETAIL"/>
    </Block>
    <Block ODGLS144_overridden:Name="SUMMARY" ODGLS144_overridden:QueryDataSourceName="PCS1005">
      <Item ODGLS144_overridden:Name="TOTAL_AMT" ODGLS144_default:ItemType="Text Item"
            ODGLS144_overridden:Prompt="Total" ODGLS144_overridden:CanvasName="CANVAS_TAB"
            ODGLS144_overridden:TabPageName="PAGE_DETAIL"/>
    </Block>
    <Canvas ODGLS144_overridden:Name="CANVAS_BODY"/>
    <Canvas ODGLS144_overridden:Name="CANVAS_TAB" ODGLS144_overridden:CanvasType="Tab">
      <TabPage ODGLS144_overridden:Name="PAGE_DETAIL" ODGLS144_overridden:Label="Details"/>
    </Canvas>
    <LOV ODGLS144_overridden:Name="LOV_DEPT" ODGLS144_overridden:Title="Departments"
         ODGLS144_overridden:RecordGroupName="RG_DEPT">
      <LOVColumnMapping ODGLS144_overridden:Name="DEPT_NO" ODGLS144_overridden:ReturnItem="HEAD.DEPT_NO"
                        ODGLS144_overridden:Title="No" ODGLS144_overridden:DisplayWidth="40"/>
      <LOVColumnMapping ODGLS144_overridden:Name="DEPT_NAME" ODGLS144_overridden:ReturnItem="HEAD.DEPT_NAME"/>
    </LOV>
    <RecordGroup ODGLS144_overridden:Name="RG_DEPT" ODGLS144_overridden:RecordGroupType="Query"
                 ODGLS144_overridden:RecordGroupQuery="select dept_no, dept_name from gls_dept">
      <RecordGroupColumn ODGLS144_overridden:Name="DEPT_NO" ODGLS144_overridden:ColumnDataType="Number"
                         ODGLS144_overridden:MaximumLength="10"/>
      <RecordGroupColumn ODGLS144_overridden:Name="DEPT_NAME" ODGLS144_overridden:DataType="Char"/>
    </RecordGroup>
    <RecordGroup ODGLS144_overridden:Name="RG_STATUS"/>
  </FormModule>
</Module>
"""


@pytest.fixture
def minimal_xml():
    return MINIMAL_FMB_XML


@pytest.fixture
def layered_xml():
    return LAYERED_FMB_XML


@pytest.fixture
def minimal_module():
    return parse_fmb_xml(MINIMAL_FMB_XML)


@pytest.fixture
def full_module():
    return parse_fmb_xml(FULL_FMB_XML)


@pytest.fixture
def fmb_file(tmp_path):
    """FULL_FMB_XML written to disk."""
    path = tmp_path / "odgls144_fmb.xml"
    path.write_text(FULL_FMB_XML, encoding="utf-8")
    return path
