from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from openpyxl import load_workbook

from cfdimx.extractor import parse_cfdi
from cfdimx.utils.reporting import default_report_destination, write_invoice_workbook

CFDI_NS = "http://www.sat.gob.mx/cfd/4"
TFD_NS = "http://www.sat.gob.mx/TimbreFiscalDigital"

SAMPLE_XML = f"""
<cfdi:Comprobante xmlns:cfdi="{CFDI_NS}" xmlns:tfd="{TFD_NS}" Version="4.0"
    Serie="A" Folio="1" Fecha="2024-03-05T12:30:00" TipoDeComprobante="I"
    Moneda="MXN" SubTotal="150.00" Total="174.00">
  <cfdi:Emisor Rfc="EKU9003173C9" Nombre="ESCUELA KEMPER URGATE" RegimenFiscal="601"/>
  <cfdi:Receptor Rfc="XAXX010101000" Nombre="PUBLICO EN GENERAL" UsoCFDI="S01"/>
  <cfdi:Conceptos>
    <cfdi:Concepto ClaveProdServ="84111506" Cantidad="1" ClaveUnidad="E48"
        Descripcion="Servicio" ValorUnitario="100.00" Importe="100.00"/>
    <cfdi:Concepto ClaveProdServ="50211503" Cantidad="2" ClaveUnidad="H87" Unidad="Pieza"
        Descripcion="Producto" ValorUnitario="25.00" Importe="50.00"/>
  </cfdi:Conceptos>
  <cfdi:Impuestos TotalImpuestosTrasladados="24.00">
    <cfdi:Traslados>
      <cfdi:Traslado Base="150.00" Impuesto="002" TipoFactor="Tasa" TasaOCuota="0.160000" Importe="24.00"/>
    </cfdi:Traslados>
  </cfdi:Impuestos>
  <cfdi:Complemento>
    <tfd:TimbreFiscalDigital UUID="AAAA-BBBB" FechaTimbrado="2024-03-05T12:31:00"
        SelloCFD="s" NoCertificadoSAT="00001000000509846663"/>
  </cfdi:Complemento>
</cfdi:Comprobante>
""".strip()


def test_default_report_destination():
    assert default_report_destination(Path("/tmp/factura.xml")) == Path(
        "/tmp/factura_cfdi.xlsx"
    )


def test_workbook_contains_all_sections(tmp_path):
    record = parse_cfdi(SAMPLE_XML).record
    destination = tmp_path / "out" / "report.xlsx"

    written = write_invoice_workbook(record, destination)

    assert written == destination
    workbook = load_workbook(destination)
    assert workbook.sheetnames == ["Comprobante", "Conceptos", "Impuestos"]

    header = {row[0]: row[1] for row in workbook["Comprobante"].iter_rows(values_only=True)}
    assert header["UUID"] == "AAAA-BBBB"
    assert header["Serie"] == "A"
    assert Decimal(str(header["Total"])) == Decimal("174")

    items = list(workbook["Conceptos"].iter_rows(values_only=True))
    assert items[0][0] == "Clave producto"
    assert [row[4] for row in items[1:]] == ["Servicio", "Producto"]
    assert items[1][3] is None
    assert items[2][3] == "Pieza"
    assert Decimal(str(items[2][6])) == Decimal("50")

    taxes = list(workbook["Impuestos"].iter_rows(values_only=True))
    assert taxes[0] == ("Impuesto", "Tipo factor", "Tasa o cuota", "Importe")
    assert taxes[1][:3] == ("002", "Tasa", "0.160000")
    assert taxes[-1][0] == "Total trasladados"
    assert Decimal(str(taxes[-1][3])) == Decimal("24")


def test_workbook_without_taxes(tmp_path):
    xml = SAMPLE_XML.split("<cfdi:Impuestos")[0] + SAMPLE_XML.split("</cfdi:Impuestos>")[1]
    record = parse_cfdi(xml).record
    destination = tmp_path / "report.xlsx"

    write_invoice_workbook(record, destination)

    taxes = list(load_workbook(destination)["Impuestos"].iter_rows(values_only=True))
    assert taxes == [("Impuesto", "Tipo factor", "Tasa o cuota", "Importe")]
